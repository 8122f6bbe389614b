"""
Core commandtree components.

This package provides the fundamental building blocks: command description
nodes, path utilities over the tree, and the collaborator protocols.
"""

from commandtree.core.description import CommandArgument, CommandDescription
from commandtree.core.path_utils import (
    construct_command_path,
    construct_message_key,
    construct_parent_list,
    find_by_label,
    find_child,
    path_from,
)
from commandtree.core.types import CommandSender, ExecutableCommand, PermissionChecker

__all__ = [
    "CommandArgument",
    "CommandDescription",
    "CommandSender",
    "ExecutableCommand",
    "PermissionChecker",
    "construct_command_path",
    "construct_message_key",
    "construct_parent_list",
    "find_by_label",
    "find_child",
    "path_from",
]
