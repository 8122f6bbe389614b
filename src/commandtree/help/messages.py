"""
Translatable help messages.

The overlay is a YAML file in the data folder, provisioned from the bundled
default on first run and read exactly once. Lookups never fail: a key that
the overlay does not define falls back to built-in English text or to the
description hard-coded on the command.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from commandtree.core.description import CommandDescription
from commandtree.core.path_utils import construct_message_key
from commandtree.provisioning import copy_resource_if_absent

logger = logging.getLogger(__name__)

DEFAULT_HELP_FILE = "help_en.yml"


class HelpMessageKey(Enum):
    """Keys for messages used when showing command help."""

    HEADER = ("header", "Help")
    SHORT_DESCRIPTION = ("description.short", "Short description")
    DETAILED_DESCRIPTION = ("description.detailed", "Detailed description")
    USAGE = ("usage", "Usage")
    ARGUMENTS = ("arguments", "Arguments")
    OPTIONAL = ("optional", "Optional")
    PERMISSIONS = ("permissions", "Permissions")
    HAS_PERMISSION = ("has_permission", "You have permission")
    NO_PERMISSION = ("no_permission", "No permission")
    PERMISSION_FREE = ("permission_free", "No permission required")
    ALTERNATIVES = ("alternatives", "Alternatives")
    COMMANDS = ("commands", "Commands")

    def __init__(self, key: str, fallback: str):
        self.key = "common." + key
        self.fallback = fallback


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """
    Flatten nested YAML mappings into dotted keys.

    Examples:
        {"common": {"usage": "Usage"}} -> {"common.usage": "Usage"}
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, dotted))
        elif value is not None:
            flat[dotted] = str(value)
    return flat


class HelpMessagesService:
    """
    Manages translatable help messages.

    Params:
        data_folder: Folder holding the overlay file
        file_name: Name of the overlay file inside ``data_folder``

    Raises:
        ResourceProvisioningError: When the default overlay cannot be created
        yaml.YAMLError: When the overlay file is not valid YAML
    """

    def __init__(self, data_folder: str | Path, file_name: str = DEFAULT_HELP_FILE):
        self._file = copy_resource_if_absent(DEFAULT_HELP_FILE, Path(data_folder) / file_name)
        with self._file.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, Mapping):
            logger.warning("Ignoring help overlay %s: top level is not a mapping", self._file)
            data = {}
        self._messages = MappingProxyType(flatten_messages(data))
        if not self._messages:
            logger.warning("Help overlay %s defines no messages, using built-in texts", self._file)
        logger.debug("Loaded %d help message(s) from %s", len(self._messages), self._file)

    @property
    def file(self) -> Path:
        return self._file

    @property
    def messages(self) -> Mapping[str, str]:
        """Read-only view of all overlay messages by dotted key."""
        return self._messages

    def get_message(self, key: HelpMessageKey) -> str:
        return self._messages.get(key.key, key.fallback)

    def get_description(self, command: CommandDescription) -> str:
        """Localized short description of ``command``, or its hard-coded one."""
        key = construct_message_key(command)
        message = self._messages.get(key) or self._messages.get(key + ".description")
        return message if message is not None else command.description

    def get_detailed_description(self, command: CommandDescription) -> str:
        """Localized detailed description of ``command``, or its hard-coded one."""
        message = self._messages.get(construct_message_key(command) + ".detailed")
        return message if message is not None else command.detailed_description
