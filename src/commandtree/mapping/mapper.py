"""
Mapping of user-typed labels to command descriptions.

The mapper walks the command tree one label at a time. Exact,
case-insensitive matches are always followed first; only when a token fails
to match at a category node does it fall back to suggesting the closest
child by normalized edit distance.
"""

import logging
from collections.abc import Sequence

from commandtree.core.description import CommandDescription
from commandtree.core.path_utils import find_child
from commandtree.core.types import CommandSender, PermissionChecker
from commandtree.mapping.result import FoundCommandResult, FoundResultStatus
from commandtree.mapping.similarity import get_difference
from commandtree.structure.tree import CommandTree

logger = logging.getLogger(__name__)


class CommandMapper:
    """
    Resolves label sequences against a sealed command tree.

    Params:
        tree: The command tree to resolve against
        permissions: Permission backend used to check the reached command
    """

    def __init__(self, tree: CommandTree, permissions: PermissionChecker):
        self._tree = tree
        self._permissions = permissions

    @property
    def tree(self) -> CommandTree:
        return self._tree

    def map_parts_to_command(
        self, sender: CommandSender, parts: Sequence[str]
    ) -> FoundCommandResult:
        """
        Map a sequence of labels to a command.

        Params:
            sender: Who invoked the command, for the permission check
            parts: Tokens starting with the base label, blank tokens already removed

        Returns:
            A FoundCommandResult describing the command reached and how the
            mapping ended; never raises for user mistakes

        Examples:
            ["authme", "register", "bob", "pw"] -> SUCCESS, arguments ("bob", "pw")
            ["authme", "regsiter"] -> UNKNOWN_LABEL suggesting "register"
        """
        if not parts:
            return FoundCommandResult(FoundResultStatus.MISSING_BASE_COMMAND, None)

        base = self._tree.find_root(parts[0])
        if base is None:
            logger.debug("No base command for label '%s'", parts[0])
            return FoundCommandResult(
                FoundResultStatus.MISSING_BASE_COMMAND,
                None,
                labels=parts[:1],
                arguments=parts[1:],
            )

        command = base
        consumed = 1
        while consumed < len(parts):
            child = find_child(command, parts[consumed])
            if child is None:
                break
            command = child
            consumed += 1

        labels = parts[:consumed]
        arguments = parts[consumed:]
        if arguments and command.is_category and command.children:
            return self._suggest_child(command, labels, arguments)
        return self._check_command(sender, command, labels, arguments)

    def resolve(self, sender: CommandSender, parts: Sequence[str]) -> FoundCommandResult:
        """Alias of :meth:`map_parts_to_command`."""
        return self.map_parts_to_command(sender, parts)

    def _suggest_child(
        self,
        command: CommandDescription,
        labels: Sequence[str],
        arguments: Sequence[str],
    ) -> FoundCommandResult:
        """Find the child closest to the unmatched token; ties keep declaration order."""
        unmatched = arguments[0]
        closest = command.children[0]
        smallest = get_difference(unmatched, closest.label)
        for child in command.children[1:]:
            difference = get_difference(unmatched, child.label)
            if difference < smallest:
                closest, smallest = child, difference

        logger.debug(
            "Unknown label '%s' under '%s', closest is '%s' (difference %.2f)",
            unmatched,
            command.label,
            closest.label,
            smallest,
        )
        return FoundCommandResult(
            FoundResultStatus.UNKNOWN_LABEL,
            closest,
            labels=labels,
            arguments=arguments,
            difference=smallest,
        )

    def _check_command(
        self,
        sender: CommandSender,
        command: CommandDescription,
        labels: Sequence[str],
        arguments: Sequence[str],
    ) -> FoundCommandResult:
        # permission before arity
        if not self._permissions.has_permission(sender, command.permission):
            status = FoundResultStatus.NO_PERMISSION
        elif command.is_category or not command.accepts_argument_count(len(arguments)):
            status = FoundResultStatus.INCORRECT_ARGUMENTS
        else:
            status = FoundResultStatus.SUCCESS

        logger.debug("Mapped %s to '%s': %s", list(labels), command.label, status.name)
        return FoundCommandResult(status, command, labels=labels, arguments=arguments)
