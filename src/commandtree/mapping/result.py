"""
Result types produced by the command mapper.
"""

from enum import Enum

from attrs import field, frozen

from commandtree.core.description import CommandDescription


class FoundResultStatus(Enum):
    """Outcome of mapping a sequence of labels to a command."""

    SUCCESS = "success"
    MISSING_BASE_COMMAND = "missing_base_command"
    UNKNOWN_LABEL = "unknown_label"
    INCORRECT_ARGUMENTS = "incorrect_arguments"
    NO_PERMISSION = "no_permission"


@frozen
class FoundCommandResult:
    """
    Immutable result of one mapping attempt.

    Attributes:
        status: How the mapping ended
        command: The command reached; for UNKNOWN_LABEL the closest candidate
            (for suggestions only, never to be executed); None only for
            MISSING_BASE_COMMAND
        labels: The labels walked to reach ``command``, as the user typed them
        arguments: Leftover tokens handed to the command as arguments
        difference: Normalized edit distance between the unmatched token and
            the suggested label (0 means identical); 0.0 unless UNKNOWN_LABEL
    """

    status: FoundResultStatus
    command: CommandDescription | None
    labels: tuple[str, ...] = field(converter=tuple, default=())
    arguments: tuple[str, ...] = field(converter=tuple, default=())
    difference: float = 0.0

    @property
    def is_success(self) -> bool:
        return self.status is FoundResultStatus.SUCCESS
