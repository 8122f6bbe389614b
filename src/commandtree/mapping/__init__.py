"""
Label-to-command mapping.

This package resolves token sequences against the command tree and
describes the outcome as a FoundCommandResult.
"""

from commandtree.mapping.mapper import CommandMapper
from commandtree.mapping.result import FoundCommandResult, FoundResultStatus
from commandtree.mapping.similarity import get_difference

__all__ = [
    "CommandMapper",
    "FoundCommandResult",
    "FoundResultStatus",
    "get_difference",
]
