"""
Registry of executable command instances.

Every distinct executable reference found in the command tree is bound to
exactly one instance, created once at start-up from an explicit factory
mapping. There is no runtime type discovery: whatever is not listed in the
factories is an error at build time, not at dispatch time.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from commandtree.core.types import ExecutableCommand
from commandtree.exceptions import UnknownExecutableError
from commandtree.structure.tree import CommandTree

logger = logging.getLogger(__name__)

ExecutableFactory = Callable[[], ExecutableCommand]


class ExecutableRegistry(Mapping[str, ExecutableCommand]):
    """Read-only mapping from executable reference to its single instance."""

    def __init__(self, instances: Mapping[str, ExecutableCommand]):
        self._instances = MappingProxyType(dict(instances))

    @classmethod
    def build(
        cls, tree: CommandTree, factories: Mapping[str, ExecutableFactory]
    ) -> "ExecutableRegistry":
        """
        Instantiate one executable per distinct reference used in ``tree``.

        Params:
            tree: The sealed command tree
            factories: Zero-argument callables (usually classes) keyed by reference

        Returns:
            The populated, read-only registry

        Raises:
            UnknownExecutableError: When the tree references an executable without a factory
        """
        instances: dict[str, ExecutableCommand] = {}
        for reference in tree.executable_references():
            if reference not in factories:
                raise UnknownExecutableError(reference, list(factories))
            instances[reference] = factories[reference]()
            logger.debug("Instantiated executable '%s'", reference)

        unused = sorted(set(factories) - set(instances))
        if unused:
            logger.debug("Executables not referenced by any command: %s", ", ".join(unused))
        return cls(instances)

    def get_executable(self, reference: str) -> ExecutableCommand:
        """
        Look up the instance bound to ``reference``.

        Raises:
            UnknownExecutableError: When nothing is registered under ``reference``
        """
        try:
            return self._instances[reference]
        except KeyError:
            raise UnknownExecutableError(reference, list(self._instances)) from None

    def __getitem__(self, reference: str) -> ExecutableCommand:
        return self._instances[reference]

    def __iter__(self) -> Iterator[str]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)
