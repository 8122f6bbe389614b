"""
Built-in help command, the target of ``/<base> help <labels...>``.
"""

import logging

from commandtree.core.path_utils import construct_command_path, find_child
from commandtree.core.types import CommandSender
from commandtree.help.provider import HelpOption, HelpProvider
from commandtree.mapping.mapper import CommandMapper
from commandtree.mapping.result import FoundResultStatus

logger = logging.getLogger(__name__)


class HelpCommand:
    """
    Shows the help of the command named by the arguments.

    The command handler passes the root label the help was invoked under as
    the first argument, so ``/email help add`` arrives as ``["email", "add"]``.
    The remaining labels are resolved below that root, unless they name
    another root that has no child of the same label
    (``/authme help login`` shows the help of ``/login``).

    Params:
        mapper: Resolves the requested labels
        help_provider: Renders the help
        suggestion_threshold: Largest difference for which a misspelled label
            is replaced by its suggestion
    """

    def __init__(
        self,
        mapper: CommandMapper,
        help_provider: HelpProvider,
        suggestion_threshold: float = 0.75,
    ):
        self._mapper = mapper
        self._help_provider = help_provider
        self._suggestion_threshold = suggestion_threshold

    def execute_command(self, sender: CommandSender, arguments: list[str]) -> None:
        parts = self._resolve_parts(arguments)

        result = self._mapper.map_parts_to_command(sender, parts)
        if result.status is FoundResultStatus.MISSING_BASE_COMMAND:
            sender.send_message("Could not get base command")
            return
        if result.status is FoundResultStatus.UNKNOWN_LABEL:
            if result.difference > self._suggestion_threshold:
                sender.send_message("Unknown command")
                return
            sender.send_message(f"Assuming {construct_command_path(result.command)}")

        command = result.command
        options = HelpOption.SHOW_CHILDREN if command.is_root else HelpOption.ALL_OPTIONS
        logger.debug("Showing help for '%s'", construct_command_path(command))
        self._help_provider.output_help(sender, result, options)

    def _resolve_parts(self, arguments: list[str]) -> list[str]:
        if len(arguments) < 2:
            return list(arguments)
        tree = self._mapper.tree
        base = tree.find_root(arguments[0])
        if base is not None and find_child(base, arguments[1]) is None:
            if tree.find_root(arguments[1]) is not None:
                return list(arguments[1:])
        return list(arguments)
