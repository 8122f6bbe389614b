"""
Command help: localized messages and help rendering.
"""

from commandtree.help.messages import HelpMessageKey, HelpMessagesService
from commandtree.help.provider import HelpOption, HelpProvider, format_arguments, format_usage

__all__ = [
    "HelpMessageKey",
    "HelpMessagesService",
    "HelpOption",
    "HelpProvider",
    "format_arguments",
    "format_usage",
]
