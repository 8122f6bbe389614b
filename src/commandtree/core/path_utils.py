"""
Common path utilities for the command tree.

This module provides the lookups every other part of the engine builds on:
finding a child by label, reconstructing the chain of commands from a root,
and rendering that chain as a command path or a dotted message key.
"""

from collections.abc import Iterable

from commandtree.core.description import CommandDescription


def find_child(command: CommandDescription, label: str) -> CommandDescription | None:
    """
    Find the child of ``command`` that answers to ``label``.

    Params:
        command: The command whose direct children are searched
        label: A user-typed label, compared case-insensitively

    Returns:
        The first matching child in declaration order, or None
    """
    return find_by_label(command.children, label)


def find_by_label(
    commands: Iterable[CommandDescription], label: str
) -> CommandDescription | None:
    """Return the first command in ``commands`` with ``label`` among its aliases."""
    for candidate in commands:
        if candidate.has_label(label):
            return candidate
    return None


def construct_parent_list(command: CommandDescription) -> list[CommandDescription]:
    """
    Build the chain of commands from the nearest root down to ``command``.

    Params:
        command: Any node of a command tree

    Returns:
        Commands ordered root first, ``command`` last

    Examples:
        /authme register -> [authme, register]
    """
    chain = []
    node: CommandDescription | None = command
    while node is not None:
        chain.append(node)
        node = node.parent
    chain.reverse()
    return chain


def path_from(command: CommandDescription) -> list[str]:
    """Canonical labels from the nearest root down to ``command`` inclusive."""
    return [node.label for node in construct_parent_list(command)]


def construct_command_path(command: CommandDescription) -> str:
    """Render ``command`` as the line a user would type, e.g. ``/authme register``."""
    return "/" + " ".join(path_from(command))


def construct_message_key(command: CommandDescription, prefix: str = "command") -> str:
    """
    Build the dotted localization key of ``command``.

    Examples:
        /authme register -> "command.authme.register"
    """
    return ".".join([prefix, *path_from(command)])
