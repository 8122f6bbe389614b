"""
Declarative command registry definitions.

The static command registry can be written as plain data (a dict or a YAML
file) and validated with pydantic before it is turned into a sealed
CommandTree. Example YAML:

    commands:
      - labels: [authme]
        description: AuthMe op commands
        children:
          - labels: [register, reg]
            description: Register a player
            permission: authme.register
            executable: register
            arguments:
              - {name: player, description: Player name}
              - {name: password, description: Password}
          - labels: [help]
            description: View help
            executable: help
            unbounded_arguments: true
            arguments:
              - {name: query, optional: true}
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from commandtree.core.description import CommandArgument, CommandDescription
from commandtree.structure.tree import CommandTree


class ArgumentSpec(BaseModel):
    """Validated description of one positional argument."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    optional: bool = False

    def to_argument(self) -> CommandArgument:
        return CommandArgument(self.name, self.description, self.optional)


class CommandSpec(BaseModel):
    """Validated description of a command and, recursively, its children."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    labels: list[str] = Field(min_length=1)
    description: str
    detailed_description: str = ""
    permission: str | None = None
    executable: str | None = None
    arguments: list[ArgumentSpec] = Field(default_factory=list)
    min_arguments: int | None = Field(default=None, ge=0)
    max_arguments: int | None = Field(default=None, ge=0)
    unbounded_arguments: bool = False
    children: list["CommandSpec"] = Field(default_factory=list)

    @field_validator("labels")
    @classmethod
    def _labels_are_single_tokens(cls, labels: list[str]) -> list[str]:
        for label in labels:
            if not label or any(char.isspace() for char in label):
                raise ValueError(f"label {label!r} must be a non-empty token without whitespace")
        return labels

    @model_validator(mode="after")
    def _check_bounds_and_children(self) -> "CommandSpec":
        if (
            self.min_arguments is not None
            and self.max_arguments is not None
            and self.min_arguments > self.max_arguments
        ):
            raise ValueError(
                f"min_arguments ({self.min_arguments}) exceeds max_arguments ({self.max_arguments})"
            )
        if self.unbounded_arguments and self.max_arguments is not None:
            raise ValueError("max_arguments cannot be combined with unbounded_arguments")
        _ensure_unique_labels(self.children, self.labels[0])
        return self

    def build(self, parent: CommandDescription | None = None) -> CommandDescription:
        """
        Materialize this spec (and its children) as CommandDescription nodes.

        Params:
            parent: Command to attach the new node to, None for a root

        Returns:
            The created command description
        """
        command = CommandDescription(
            labels=self.labels,
            description=self.description,
            detailed_description=self.detailed_description,
            permission=self.permission,
            executable=self.executable,
            arguments=[argument.to_argument() for argument in self.arguments],
            min_arguments=self.min_arguments,
            max_arguments=self.max_arguments,
            unbounded_arguments=self.unbounded_arguments,
            parent=parent,
        )
        for child in self.children:
            child.build(parent=command)
        return command


CommandSpec.model_rebuild()


class CommandRegistrySpec(BaseModel):
    """The whole static command registry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    commands: list[CommandSpec] = Field(min_length=1)

    @model_validator(mode="after")
    def _roots_are_unique(self) -> "CommandRegistrySpec":
        _ensure_unique_labels(self.commands, None)
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommandRegistrySpec":
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "CommandRegistrySpec":
        """Load and validate a registry from a YAML file."""
        path = Path(yaml_path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def build_tree(self) -> CommandTree:
        """Build and seal the command tree described by this registry."""
        return CommandTree(spec.build() for spec in self.commands)


def _ensure_unique_labels(specs: list[CommandSpec], parent_label: str | None) -> None:
    seen: dict[str, str] = {}
    for spec in specs:
        for label in spec.labels:
            key = label.lower()
            if key in seen:
                where = f"under '{parent_label}'" if parent_label else "among root commands"
                raise ValueError(f"label '{label}' is used twice {where}")
            seen[key] = label


def load_command_tree(source: str | Path | dict[str, Any]) -> CommandTree:
    """
    Validate a command registry and build its tree.

    Params:
        source: A registry dict, or the path of a YAML registry file

    Returns:
        The sealed command tree

    Raises:
        pydantic.ValidationError: When the registry data is invalid
    """
    if isinstance(source, dict):
        spec = CommandRegistrySpec.from_dict(source)
    else:
        spec = CommandRegistrySpec.from_yaml(source)
    return spec.build_tree()
