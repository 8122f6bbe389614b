"""
Executables shipped with commandtree.
"""

from commandtree.builtins.help_command import HelpCommand

__all__ = ["HelpCommand"]
