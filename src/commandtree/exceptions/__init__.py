"""
commandtree exception classes.

This package provides all exception types used throughout commandtree
for consistent error handling and reporting.
"""

from commandtree.exceptions.core import (
    CommandDefinitionError,
    CommandTreeError,
    CommandTreeSealedError,
    DuplicateLabelError,
    ResourceProvisioningError,
    SettingsError,
    UnknownExecutableError,
)

__all__ = [
    "CommandTreeError",
    "CommandDefinitionError",
    "CommandTreeSealedError",
    "DuplicateLabelError",
    "ResourceProvisioningError",
    "SettingsError",
    "UnknownExecutableError",
]
