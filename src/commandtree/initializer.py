"""
Start-up wiring of the command engine.

Everything the engine reads at runtime (settings, help overlay, command
tree, executable instances) is created here once, in dependency order, and
handed over read-only to the CommandHandler.
"""

import logging
from collections.abc import Mapping
from functools import partial
from pathlib import Path

from commandtree.builtins.help_command import HelpCommand
from commandtree.core.types import PermissionChecker
from commandtree.handler import HELP_EXECUTABLE, CommandHandler
from commandtree.help.messages import HelpMessagesService
from commandtree.help.provider import HelpProvider
from commandtree.mapping.mapper import CommandMapper
from commandtree.settings import EngineSettings
from commandtree.structure.executables import ExecutableFactory, ExecutableRegistry
from commandtree.structure.tree import CommandTree

PACKAGE_LOGGER = "commandtree"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger.

    - Applies ``level`` to the ``commandtree`` logger.
    - Adds a single stream handler; calling again only updates the level.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        package_logger.addHandler(handler)
    return package_logger


class Initializer:
    """
    Initializes the services of the command engine.

    Params:
        data_folder: Folder holding config.yml and the help overlay
    """

    def __init__(self, data_folder: str | Path):
        self._data_folder = Path(data_folder)

    def create_settings(self) -> EngineSettings:
        """Load settings, provisioning the default config.yml on first run."""
        return EngineSettings.load(self._data_folder)

    def create_help_messages(self, settings: EngineSettings) -> HelpMessagesService:
        return HelpMessagesService(self._data_folder, settings.help_file)

    def create_command_handler(
        self,
        tree: CommandTree,
        permissions: PermissionChecker,
        executables: Mapping[str, ExecutableFactory],
        settings: EngineSettings | None = None,
    ) -> CommandHandler:
        """
        Build the complete engine around ``tree``.

        The built-in help command is bound to the ``help`` reference unless
        ``executables`` already provides one.

        Params:
            tree: The sealed command tree
            permissions: Permission backend
            executables: Factories for every executable reference used in the tree
            settings: Settings to use; loaded from the data folder when omitted

        Returns:
            The ready-to-use command handler

        Raises:
            UnknownExecutableError: When the tree references an executable without a factory
            ResourceProvisioningError: When default resources cannot be created
        """
        if settings is None:
            settings = self.create_settings()
        setup_logging(settings.log_level)

        help_messages = self.create_help_messages(settings)
        mapper = CommandMapper(tree, permissions)
        help_provider = HelpProvider(help_messages, permissions, settings.plugin_name)

        factories = dict(executables)
        if HELP_EXECUTABLE not in factories:
            factories[HELP_EXECUTABLE] = partial(
                HelpCommand, mapper, help_provider, settings.suggestion_threshold
            )
        registry = ExecutableRegistry.build(tree, factories)

        logger.info(
            "Command engine ready: %d root command(s), %d executable(s)",
            len(tree),
            len(registry),
        )
        return CommandHandler(
            mapper,
            registry,
            permissions,
            help_provider,
            plugin_name=settings.plugin_name,
            suggestion_threshold=settings.suggestion_threshold,
        )
