"""
Command tree structure.

This package holds the sealed command tree, the declarative registry
models it can be built from, and the registry of executable instances.
"""

from commandtree.structure.executables import ExecutableFactory, ExecutableRegistry
from commandtree.structure.specs import (
    ArgumentSpec,
    CommandRegistrySpec,
    CommandSpec,
    load_command_tree,
)
from commandtree.structure.tree import CommandTree

__all__ = [
    "ArgumentSpec",
    "CommandRegistrySpec",
    "CommandSpec",
    "CommandTree",
    "ExecutableFactory",
    "ExecutableRegistry",
    "load_command_tree",
]
