"""
The command tree: the sealed set of root commands the engine resolves against.
"""

import logging
from collections.abc import Iterable, Iterator

from commandtree.core.description import CommandDescription
from commandtree.core.path_utils import find_by_label
from commandtree.exceptions import CommandDefinitionError, DuplicateLabelError

logger = logging.getLogger(__name__)


class CommandTree:
    """
    Read-only collection of root commands.

    Construction validates the roots, seals every node and from then on the
    tree cannot change; rebuilding means constructing a new CommandTree.

    Params:
        roots: Root command descriptions in declaration order

    Raises:
        CommandDefinitionError: When a supplied command is not a root
        DuplicateLabelError: When two roots share a label
    """

    def __init__(self, roots: Iterable[CommandDescription]):
        accepted: list[CommandDescription] = []
        for root in roots:
            if not root.is_root:
                raise CommandDefinitionError(root.labels, "only root commands can be added to a tree")
            for label in root.labels:
                if find_by_label(accepted, label) is not None:
                    raise DuplicateLabelError(label)
            accepted.append(root)

        for root in accepted:
            root.seal()
        self._roots = tuple(accepted)
        logger.debug(
            "Command tree built with %d root(s) and %d command(s)",
            len(self._roots),
            sum(1 for _ in self.walk()),
        )

    @property
    def roots(self) -> tuple[CommandDescription, ...]:
        return self._roots

    def find_root(self, label: str) -> CommandDescription | None:
        """Return the root command answering to ``label``, ignoring case."""
        return find_by_label(self._roots, label)

    def walk(self) -> Iterator[CommandDescription]:
        """Yield every command of the tree, depth first in declaration order."""
        for root in self._roots:
            yield from root.walk()

    def executable_references(self) -> list[str]:
        """Distinct executable references in order of first appearance."""
        references: dict[str, None] = {}
        for command in self.walk():
            if command.executable is not None:
                references.setdefault(command.executable)
        return list(references)

    def __iter__(self) -> Iterator[CommandDescription]:
        return iter(self._roots)

    def __len__(self) -> int:
        return len(self._roots)
