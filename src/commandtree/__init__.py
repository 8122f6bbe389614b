"""
commandtree - hierarchical command resolution and dispatch

commandtree maps command labels typed by a user onto a tree of command
descriptions, checks permissions and argument counts, suggests the closest
command for typos, and renders localized help.
"""

from importlib.metadata import version

from commandtree.core import CommandArgument, CommandDescription
from commandtree.handler import CommandHandler
from commandtree.initializer import Initializer
from commandtree.mapping import CommandMapper, FoundCommandResult, FoundResultStatus
from commandtree.structure import CommandTree, ExecutableRegistry, load_command_tree

__version__ = version("commandtree")

__all__ = [
    "__version__",
    "CommandArgument",
    "CommandDescription",
    "CommandHandler",
    "CommandMapper",
    "CommandTree",
    "ExecutableRegistry",
    "FoundCommandResult",
    "FoundResultStatus",
    "Initializer",
    "load_command_tree",
]
