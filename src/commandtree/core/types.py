"""
Core type definitions for commandtree.

These protocols describe the collaborators the engine talks to without
owning them: whoever sends a command, the permission backend deciding what
a sender may do, and the executable behaviors bound to command nodes.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandSender(Protocol):
    """Anything that can invoke a command and receive text back."""

    def send_message(self, message: str) -> None: ...


class PermissionChecker(Protocol):
    """Boolean permission contract of the permission backend.

    A permission of ``None`` means the command is open to everyone and
    implementations must return True for it.
    """

    def has_permission(self, sender: CommandSender, permission: str | None) -> bool: ...


@runtime_checkable
class ExecutableCommand(Protocol):
    """Behavior bound to a command node through its executable reference."""

    def execute_command(self, sender: CommandSender, arguments: list[str]) -> None: ...
