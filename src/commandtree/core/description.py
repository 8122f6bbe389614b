"""
Command description nodes for the commandtree framework.

A CommandDescription is one node of the command tree: it carries the labels
a user may type to select it, its help texts, the permission it requires,
its argument bounds and the reference of the executable bound to it.
Nodes are linked into a tree at construction time and sealed afterwards.
"""

import weakref
from collections.abc import Iterable, Iterator

from attrs import frozen

from commandtree.exceptions import (
    CommandDefinitionError,
    CommandTreeSealedError,
    DuplicateLabelError,
)

# Suffixes of the per-command help overlay keys ("command.<path>.description"
# and "command.<path>.detailed"), so no command may be labelled like them.
RESERVED_LABELS = frozenset({"description", "detailed"})


@frozen
class CommandArgument:
    """Description of a single positional argument, used for help output."""

    name: str
    description: str = ""
    optional: bool = False


class CommandDescription:
    """
    Node in the command tree.

    Children are owned by their parent; the parent link is a weak reference
    so the tree never holds a strong reference cycle. Passing ``parent``
    attaches the new node as the last child of that parent.

    Params:
        labels: Aliases of the command; the first one is canonical
        description: Short, hard-coded description
        detailed_description: Longer, hard-coded description
        permission: Permission node required to run the command, None if open
        executable: Reference of the executable behavior, None for category nodes
        arguments: Argument descriptions, used for help and default bounds
        min_arguments: Lower bound; defaults to the number of required arguments
        max_arguments: Upper bound; defaults to the number of arguments
        unbounded_arguments: Accept any number of arguments above the minimum
        parent: Enclosing command, None for root commands

    Raises:
        CommandDefinitionError: When labels or argument bounds are invalid
        DuplicateLabelError: When a sibling already uses one of the labels
        CommandTreeSealedError: When the parent belongs to a sealed tree
    """

    def __init__(
        self,
        labels: Iterable[str],
        description: str,
        detailed_description: str = "",
        permission: str | None = None,
        executable: str | None = None,
        arguments: Iterable[CommandArgument] = (),
        min_arguments: int | None = None,
        max_arguments: int | None = None,
        unbounded_arguments: bool = False,
        parent: "CommandDescription | None" = None,
    ):
        self._labels = tuple(labels)
        self._validate_labels()

        self.description = description
        self.detailed_description = detailed_description or description
        self.permission = permission
        self.executable = executable
        self.arguments = tuple(arguments)

        required = sum(1 for argument in self.arguments if not argument.optional)
        self.min_arguments = required if min_arguments is None else min_arguments
        if unbounded_arguments:
            self.max_arguments = None
        elif max_arguments is None:
            self.max_arguments = max(len(self.arguments), self.min_arguments)
        else:
            self.max_arguments = max_arguments
        self._validate_bounds()

        self._children: list[CommandDescription] = []
        self._parent_ref: weakref.ref[CommandDescription] | None = None
        self._sealed = False

        if parent is not None:
            parent.add_child(self)

    def _validate_labels(self) -> None:
        if not self._labels:
            raise CommandDefinitionError(self._labels, "at least one label is required")
        seen = set()
        for label in self._labels:
            if not isinstance(label, str) or not label.strip():
                raise CommandDefinitionError(self._labels, "labels must be non-blank strings")
            if label != label.strip() or any(char.isspace() for char in label):
                raise CommandDefinitionError(self._labels, f"label '{label}' contains whitespace")
            key = label.lower()
            if key in RESERVED_LABELS:
                raise CommandDefinitionError(self._labels, f"label '{label}' is reserved")
            if key in seen:
                raise CommandDefinitionError(self._labels, f"label '{label}' is listed twice")
            seen.add(key)

    def _validate_bounds(self) -> None:
        if self.min_arguments < 0:
            raise CommandDefinitionError(self._labels, "minimum argument count cannot be negative")
        if self.max_arguments is not None and self.max_arguments < self.min_arguments:
            raise CommandDefinitionError(
                self._labels,
                f"maximum argument count {self.max_arguments} is below minimum {self.min_arguments}",
            )

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def label(self) -> str:
        """The canonical label."""
        return self._labels[0]

    @property
    def parent(self) -> "CommandDescription | None":
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> tuple["CommandDescription", ...]:
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def is_category(self) -> bool:
        """True for nodes that only group children and cannot run themselves."""
        return self.executable is None

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def has_label(self, label: str) -> bool:
        """Check whether ``label`` is one of this command's aliases, ignoring case."""
        key = label.lower()
        return any(own.lower() == key for own in self._labels)

    def accepts_argument_count(self, count: int) -> bool:
        if count < self.min_arguments:
            return False
        return self.max_arguments is None or count <= self.max_arguments

    def add_child(self, child: "CommandDescription") -> None:
        """
        Attach ``child`` as the last child of this command.

        Params:
            child: A detached command description

        Raises:
            CommandTreeSealedError: When this command is already sealed
            CommandDefinitionError: When the child already has a parent
            DuplicateLabelError: When a sibling already uses one of the child's labels
        """
        if self._sealed:
            raise CommandTreeSealedError(self._display_path())
        if child._parent_ref is not None:
            raise CommandDefinitionError(child.labels, "command is already attached to a parent")
        if child is self or any(child is ancestor for ancestor in self._ancestors()):
            raise CommandDefinitionError(child.labels, "command cannot be its own ancestor")
        for label in child.labels:
            for sibling in self._children:
                if sibling.has_label(label):
                    raise DuplicateLabelError(label, self._display_path())

        child._parent_ref = weakref.ref(self)
        self._children.append(child)

    def seal(self) -> None:
        """Freeze this command and its whole subtree."""
        if self._sealed:
            return
        self._sealed = True
        for child in self._children:
            child.seal()

    def walk(self) -> Iterator["CommandDescription"]:
        """Yield this command and all descendants, depth first in declaration order."""
        yield self
        for child in self._children:
            yield from child.walk()

    def _ancestors(self) -> Iterator["CommandDescription"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def _display_path(self) -> str:
        labels = [self.label] + [ancestor.label for ancestor in self._ancestors()]
        return " ".join(reversed(labels))

    def __setattr__(self, name, value):
        if getattr(self, "_sealed", False):
            raise CommandTreeSealedError(self._display_path())
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if self._sealed:
            raise CommandTreeSealedError(self._display_path())
        super().__delattr__(name)

    def __repr__(self) -> str:
        return f"CommandDescription({self._display_path()!r})"
