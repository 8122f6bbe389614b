"""
Shared test fixtures and utilities for the commandtree test suite.
"""

import pytest

from commandtree.core.description import CommandArgument, CommandDescription
from commandtree.help.messages import HelpMessagesService
from commandtree.help.provider import HelpProvider
from commandtree.mapping.mapper import CommandMapper
from commandtree.structure.tree import CommandTree


class FakeSender:
    """Sender that records every message and holds a fixed set of permissions."""

    def __init__(self, name: str, permissions: set[str] | None = None):
        self.name = name
        self.permissions = set(permissions or ())
        self.messages: list[str] = []

    def send_message(self, message: str) -> None:
        self.messages.append(message)


class FakePermissions:
    """Permission backend backed by the sender's own permission set."""

    def has_permission(self, sender: FakeSender, permission: str | None) -> bool:
        return permission is None or permission in sender.permissions


class RecordingExecutable:
    """Executable that remembers how it was called."""

    def __init__(self):
        self.calls: list[tuple[FakeSender, list[str]]] = []

    def execute_command(self, sender: FakeSender, arguments: list[str]) -> None:
        self.calls.append((sender, arguments))


ALL_PERMISSIONS = {"authme.register", "authme.email.add", "authme.email.change"}

EXECUTABLE_REFERENCES = ["register", "help", "email.add", "email.change", "login"]


def build_authme_tree() -> CommandTree:
    """
    Build the command tree used throughout the tests:

        /authme                      category
        /authme register|reg         <player> <password>, authme.register
        /authme help                 [query] ...
        /authme email                category
        /authme email add            <email>, authme.email.add
        /authme email change         <old> <new>, authme.email.change
        /login|l                     <password>
    """
    authme = CommandDescription(["authme"], "AuthMe op commands")
    CommandDescription(
        ["register", "reg"],
        "Register a player",
        detailed_description="Register the specified player with the given password.",
        permission="authme.register",
        executable="register",
        arguments=[
            CommandArgument("player", "Player name"),
            CommandArgument("password", "Password"),
        ],
        parent=authme,
    )
    CommandDescription(
        ["help"],
        "View help",
        detailed_description="View detailed help for AuthMe commands.",
        executable="help",
        arguments=[CommandArgument("query", "The command to get help for", optional=True)],
        unbounded_arguments=True,
        parent=authme,
    )
    email = CommandDescription(["email"], "Manage your email", parent=authme)
    CommandDescription(
        ["add"],
        "Add an email",
        permission="authme.email.add",
        executable="email.add",
        arguments=[CommandArgument("email", "Email address")],
        parent=email,
    )
    CommandDescription(
        ["change"],
        "Change your email",
        permission="authme.email.change",
        executable="email.change",
        arguments=[CommandArgument("old", "Old email"), CommandArgument("new", "New email")],
        parent=email,
    )
    login = CommandDescription(
        ["login", "l"],
        "Log in",
        executable="login",
        arguments=[CommandArgument("password", "Your password")],
    )
    return CommandTree([authme, login])


@pytest.fixture
def tree() -> CommandTree:
    return build_authme_tree()


@pytest.fixture
def permissions() -> FakePermissions:
    return FakePermissions()


@pytest.fixture
def admin() -> FakeSender:
    return FakeSender("admin", ALL_PERMISSIONS)


@pytest.fixture
def guest() -> FakeSender:
    return FakeSender("guest")


@pytest.fixture
def mapper(tree, permissions) -> CommandMapper:
    return CommandMapper(tree, permissions)


@pytest.fixture
def help_messages(tmp_path) -> HelpMessagesService:
    return HelpMessagesService(tmp_path)


@pytest.fixture
def help_provider(help_messages, permissions) -> HelpProvider:
    return HelpProvider(help_messages, permissions, "AuthMe")


@pytest.fixture
def executables() -> dict[str, RecordingExecutable]:
    return {reference: RecordingExecutable() for reference in EXECUTABLE_REFERENCES}
