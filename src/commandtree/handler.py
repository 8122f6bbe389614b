"""
The command handler: entry point that maps incoming commands and either
runs the matching executable or tells the sender what went wrong.
"""

import logging
from collections.abc import Iterable
from typing import assert_never

from commandtree.core.path_utils import construct_command_path
from commandtree.core.types import CommandSender, PermissionChecker
from commandtree.help.provider import HelpOption, HelpProvider
from commandtree.mapping.mapper import CommandMapper
from commandtree.mapping.result import FoundCommandResult, FoundResultStatus
from commandtree.structure.executables import ExecutableRegistry

logger = logging.getLogger(__name__)

SUGGEST_COMMAND_THRESHOLD = 0.75
HELP_EXECUTABLE = "help"


def skip_empty_arguments(arguments: Iterable[str]) -> list[str]:
    """Drop tokens that are empty or whitespace only, keeping the others verbatim."""
    return [argument for argument in arguments if argument and not argument.isspace()]


class CommandHandler:
    """
    Routes incoming commands to their executables.

    Params:
        mapper: Resolves token sequences to commands
        executables: Read-only registry of executable instances
        permissions: Permission backend
        help_provider: Renders argument help for incorrect invocations
        plugin_name: Name used in the generic parse-failure message
        suggestion_threshold: Largest difference that still yields a suggestion
        help_executable: Reference of the help command; it receives the invoked
            root label in front of its arguments, so one instance serves every root
    """

    def __init__(
        self,
        mapper: CommandMapper,
        executables: ExecutableRegistry,
        permissions: PermissionChecker,
        help_provider: HelpProvider,
        plugin_name: str = "AuthMe",
        suggestion_threshold: float = SUGGEST_COMMAND_THRESHOLD,
        help_executable: str = HELP_EXECUTABLE,
    ):
        self._mapper = mapper
        self._executables = executables
        self._permissions = permissions
        self._help_provider = help_provider
        self._plugin_name = plugin_name
        self._suggestion_threshold = suggestion_threshold
        self._help_executable = help_executable

    def process_command(
        self, sender: CommandSender, base_label: str, arguments: Iterable[str]
    ) -> bool:
        """
        Map an invoked command and run it or report why it cannot run.

        Params:
            sender: Who invoked the command
            base_label: The label the command was invoked with, e.g. "authme"
            arguments: The raw tokens that followed the label

        Returns:
            False when the base label belongs to no known command, True otherwise
            (including user errors, which have been reported to the sender)
        """
        parts = [base_label, *skip_empty_arguments(arguments)]
        result = self._mapper.map_parts_to_command(sender, parts)
        self._handle_command_result(sender, result)
        return result.status is not FoundResultStatus.MISSING_BASE_COMMAND

    def _handle_command_result(self, sender: CommandSender, result: FoundCommandResult) -> None:
        status = result.status
        match status:
            case FoundResultStatus.SUCCESS:
                self._execute_command(sender, result)
            case FoundResultStatus.MISSING_BASE_COMMAND:
                sender.send_message(f"Failed to parse {self._plugin_name} command!")
            case FoundResultStatus.INCORRECT_ARGUMENTS:
                self._send_improper_arguments_message(sender, result)
            case FoundResultStatus.UNKNOWN_LABEL:
                self._send_unknown_command_message(sender, result)
            case FoundResultStatus.NO_PERMISSION:
                self._send_permission_denied_error(sender)
            case _:
                assert_never(status)

    def _execute_command(self, sender: CommandSender, result: FoundCommandResult) -> None:
        command = result.command
        executable = self._executables.get_executable(command.executable)
        arguments = list(result.arguments)
        if command.executable == self._help_executable:
            arguments.insert(0, result.labels[0])
        logger.debug("Executing '%s' with %d argument(s)", construct_command_path(command), len(arguments))
        executable.execute_command(sender, arguments)

    def _send_unknown_command_message(self, sender: CommandSender, result: FoundCommandResult) -> None:
        """Report an unknown command and suggest the closest one if it is similar enough."""
        sender.send_message("Unknown command!")

        if result.command is not None and result.difference <= self._suggestion_threshold:
            sender.send_message(f"Did you mean {construct_command_path(result.command)}?")

        sender.send_message(f"Use the command /{result.labels[0]} help to view help.")

    def _send_improper_arguments_message(self, sender: CommandSender, result: FoundCommandResult) -> None:
        command = result.command
        if not self._permissions.has_permission(sender, command.permission):
            self._send_permission_denied_error(sender)
            return

        sender.send_message("Incorrect command arguments!")
        options = HelpOption.SHOW_ARGUMENTS
        if command.is_category:
            options |= HelpOption.SHOW_CHILDREN
        self._help_provider.output_help(sender, result, options)

        labels = result.labels
        child_label = labels[1] if len(labels) >= 2 else ""
        sender.send_message(f"Detailed help: /{labels[0]} help {child_label}".rstrip())

    @staticmethod
    def _send_permission_denied_error(sender: CommandSender) -> None:
        sender.send_message("You don't have permission to use this command!")
