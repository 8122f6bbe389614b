"""
Exception classes for command tree construction and dispatch.

This module defines specific exception types for the programmer and
configuration errors that can occur while building the command tree,
provisioning resources and wiring executables. Ordinary user mistakes
(unknown labels, wrong argument counts, missing permissions) are never
raised; they are reported through FoundCommandResult statuses instead.
"""

from pathlib import Path


class CommandTreeError(Exception):
    """Base exception for all commandtree-related errors."""

    pass


class CommandDefinitionError(CommandTreeError):
    """Raised when a command description is structurally invalid."""

    def __init__(self, labels: list[str] | tuple[str, ...], reason: str):
        """
        Initialize the exception.

        Params:
            labels: The labels of the offending command (may be empty)
            reason: Why the definition is invalid
        """
        self.labels = tuple(labels)
        self.reason = reason
        shown = "/".join(self.labels) if self.labels else "<unlabelled>"
        super().__init__(f"Invalid command '{shown}': {reason}")


class DuplicateLabelError(CommandDefinitionError):
    """Raised when two siblings share a label case-insensitively."""

    def __init__(self, label: str, parent_path: str | None = None):
        """
        Initialize the exception.

        Params:
            label: The label that is already taken
            parent_path: Path of the parent command, or None for root commands
        """
        self.label = label
        self.parent_path = parent_path
        where = f"under '{parent_path}'" if parent_path else "among root commands"
        super().__init__([label], f"label '{label}' is already used {where}")


class CommandTreeSealedError(CommandTreeError):
    """Raised when the command tree is modified after construction."""

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: Path of the command that was about to be modified
        """
        self.path = path
        super().__init__(f"Command '{path}' belongs to a sealed tree and cannot be modified")


class UnknownExecutableError(CommandTreeError):
    """Raised when an executable reference has no registered implementation."""

    def __init__(self, reference: str, available: list[str] | None = None):
        """
        Initialize the exception.

        Params:
            reference: The executable reference that could not be resolved
            available: Known references, shown to ease debugging
        """
        self.reference = reference
        self.available = sorted(available or [])
        message = f"No executable registered for '{reference}'"
        if self.available:
            message += f". Available executables: {', '.join(self.available)}"
        super().__init__(message)


class ResourceProvisioningError(CommandTreeError):
    """Raised when a bundled default resource cannot be copied to the data folder."""

    def __init__(self, resource: str, destination: Path, reason: str):
        """
        Initialize the exception.

        Params:
            resource: Name of the bundled resource
            destination: Where the resource should have been written
            reason: The underlying reason for the failure
        """
        self.resource = resource
        self.destination = destination
        self.reason = reason
        super().__init__(f"Could not copy '{resource}' to '{destination}': {reason}")


class SettingsError(CommandTreeError):
    """Raised when a settings file cannot be interpreted."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: Where the settings came from (usually a file path)
            reason: Why the settings are invalid
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid settings in {source}: {reason}")
