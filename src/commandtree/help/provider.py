"""
Rendering of command help.
"""

import logging
from enum import Flag

from commandtree.core.description import CommandDescription
from commandtree.core.path_utils import path_from
from commandtree.core.types import CommandSender, PermissionChecker
from commandtree.help.messages import HelpMessageKey, HelpMessagesService
from commandtree.mapping.result import FoundCommandResult

logger = logging.getLogger(__name__)


class HelpOption(Flag):
    """Sections to include when rendering help."""

    NONE = 0
    SHOW_LONG_DESCRIPTION = 1
    SHOW_ARGUMENTS = 2
    SHOW_PERMISSIONS = 4
    SHOW_ALTERNATIVES = 8
    SHOW_CHILDREN = 16
    HIDE_COMMAND = 32

    ALL_OPTIONS = (
        SHOW_LONG_DESCRIPTION
        | SHOW_ARGUMENTS
        | SHOW_PERMISSIONS
        | SHOW_ALTERNATIVES
        | SHOW_CHILDREN
    )


def format_arguments(command: CommandDescription) -> str:
    """
    Argument placeholders for a usage line.

    Described arguments use their names, ``<required>`` and ``[optional]``;
    otherwise placeholders are numbered from the argument bounds. Unbounded
    commands end with ``...``.

    Examples:
        register (player, password) -> "<player> <password>"
        min=1, max=2 without descriptions -> "<arg1> [arg2]"
    """
    if command.arguments:
        parts = [
            f"[{argument.name}]" if argument.optional else f"<{argument.name}>"
            for argument in command.arguments
        ]
    else:
        upper = command.max_arguments if command.max_arguments is not None else command.min_arguments
        parts = [
            f"<arg{index}>" if index <= command.min_arguments else f"[arg{index}]"
            for index in range(1, upper + 1)
        ]
    if command.max_arguments is None:
        parts.append("...")
    return " ".join(parts)


def format_usage(command: CommandDescription, labels: list[str] | None = None) -> str:
    """The command line to type for ``command``, e.g. ``/authme register <player> <password>``."""
    line = "/" + " ".join(labels if labels is not None else path_from(command))
    arguments = format_arguments(command)
    return f"{line} {arguments}" if arguments else line


class HelpProvider:
    """
    Builds help output for commands.

    Params:
        messages: Source of localized texts
        permissions: Permission backend, used to annotate and filter output
        plugin_name: Name shown in the help header
    """

    def __init__(
        self,
        messages: HelpMessagesService,
        permissions: PermissionChecker,
        plugin_name: str = "AuthMe",
    ):
        self._messages = messages
        self._permissions = permissions
        self._plugin_name = plugin_name

    def output_help(
        self,
        sender: CommandSender,
        result: FoundCommandResult,
        options: HelpOption = HelpOption.NONE,
    ) -> None:
        """Send the help for ``result`` to ``sender`` line by line."""
        for line in self.build_help_lines(sender, result, options):
            sender.send_message(line)

    def build_help_lines(
        self,
        sender: CommandSender,
        result: FoundCommandResult,
        options: HelpOption = HelpOption.NONE,
    ) -> list[str]:
        """
        Render the help for the command of ``result``.

        Params:
            sender: Whose permissions decide which children are listed
            result: A mapping result carrying the command to describe
            options: Sections to include

        Returns:
            The help lines, empty when the result has no command
        """
        command = result.command
        if command is None:
            logger.debug("No help to render for result with status %s", result.status.name)
            return []

        lines: list[str] = []
        if not options & HelpOption.HIDE_COMMAND:
            header = self._messages.get_message(HelpMessageKey.HEADER)
            lines.append(f"==========[ {self._plugin_name} {header} ]==========")
            lines.extend(self._command_lines(command))
        if options & HelpOption.SHOW_LONG_DESCRIPTION:
            lines.extend(self._detailed_description_lines(command))
        if options & HelpOption.SHOW_ARGUMENTS:
            lines.extend(self._argument_lines(command))
        if options & HelpOption.SHOW_PERMISSIONS:
            lines.extend(self._permission_lines(sender, command))
        if options & HelpOption.SHOW_ALTERNATIVES:
            lines.extend(self._alternative_lines(command))
        if options & HelpOption.SHOW_CHILDREN:
            lines.extend(self._children_lines(sender, command))
        return lines

    def _command_lines(self, command: CommandDescription) -> list[str]:
        usage = self._messages.get_message(HelpMessageKey.USAGE)
        short = self._messages.get_message(HelpMessageKey.SHORT_DESCRIPTION)
        return [
            f"{usage}: {format_usage(command)}",
            f"{short}: {self._messages.get_description(command)}",
        ]

    def _detailed_description_lines(self, command: CommandDescription) -> list[str]:
        title = self._messages.get_message(HelpMessageKey.DETAILED_DESCRIPTION)
        return [f"{title}:", f" {self._messages.get_detailed_description(command)}"]

    def _argument_lines(self, command: CommandDescription) -> list[str]:
        if not command.arguments:
            return []
        optional = self._messages.get_message(HelpMessageKey.OPTIONAL)
        lines = [self._messages.get_message(HelpMessageKey.ARGUMENTS) + ":"]
        for argument in command.arguments:
            line = f" {argument.name}: {argument.description}"
            if argument.optional:
                line += f" ({optional})"
            lines.append(line)
        return lines

    def _permission_lines(self, sender: CommandSender, command: CommandDescription) -> list[str]:
        lines = [self._messages.get_message(HelpMessageKey.PERMISSIONS) + ":"]
        if command.permission is None:
            lines.append(" " + self._messages.get_message(HelpMessageKey.PERMISSION_FREE))
            return lines
        if self._permissions.has_permission(sender, command.permission):
            state = self._messages.get_message(HelpMessageKey.HAS_PERMISSION)
        else:
            state = self._messages.get_message(HelpMessageKey.NO_PERMISSION)
        lines.append(f" {command.permission} ({state})")
        return lines

    def _alternative_lines(self, command: CommandDescription) -> list[str]:
        if len(command.labels) < 2:
            return []
        prefix = path_from(command)[:-1]
        lines = [self._messages.get_message(HelpMessageKey.ALTERNATIVES) + ":"]
        for alias in command.labels[1:]:
            lines.append(" " + format_usage(command, prefix + [alias]))
        return lines

    def _children_lines(self, sender: CommandSender, command: CommandDescription) -> list[str]:
        visible = [
            child
            for child in command.children
            if self._permissions.has_permission(sender, child.permission)
        ]
        if not visible:
            return []
        lines = [self._messages.get_message(HelpMessageKey.COMMANDS) + ":"]
        for child in visible:
            lines.append(f" {format_usage(child)}: {self._messages.get_description(child)}")
        return lines
