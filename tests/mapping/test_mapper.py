"""
Tests for mapping token sequences to commands.

Focus Areas:
1. Base command lookup
2. Exact descent and fuzzy suggestions at category nodes
3. Permission and argument count checks, in that order
"""

import pytest

from commandtree.core.description import CommandDescription
from commandtree.core.path_utils import path_from
from commandtree.mapping.mapper import CommandMapper
from commandtree.mapping.result import FoundResultStatus
from commandtree.structure.tree import CommandTree

from conftest import ALL_PERMISSIONS, FakePermissions, FakeSender


class TestMissingBaseCommand:
    """Test the first label."""

    @pytest.mark.parametrize(
        "parts",
        [["unknown"], ["nope", "register", "bob", "pw"], ["authm", "help"], ["regsiter"]],
    )
    def test_unknown_base_label(self, mapper, admin, parts):
        """An unknown first label is never fuzzy matched."""
        result = mapper.map_parts_to_command(admin, parts)
        assert result.status is FoundResultStatus.MISSING_BASE_COMMAND
        assert result.command is None

    def test_empty_parts(self, mapper, admin):
        """Nothing to map means no base command."""
        result = mapper.map_parts_to_command(admin, [])
        assert result.status is FoundResultStatus.MISSING_BASE_COMMAND

    def test_base_label_ignores_case(self, mapper, admin):
        """Root labels match case-insensitively."""
        result = mapper.map_parts_to_command(admin, ["LOGIN", "secret"])
        assert result.status is FoundResultStatus.SUCCESS
        assert result.command.label == "login"


class TestSuccess:
    """Test fully resolved commands."""

    def test_register_with_permission(self, mapper, admin):
        """A permitted command with the right arity succeeds."""
        result = mapper.map_parts_to_command(admin, ["authme", "register", "bob", "pw"])
        assert result.status is FoundResultStatus.SUCCESS
        assert result.command.label == "register"
        assert result.labels == ("authme", "register")
        assert result.arguments == ("bob", "pw")
        assert result.difference == 0.0

    def test_help_without_arguments(self, mapper, guest):
        """Help needs no permission and no arguments."""
        result = mapper.map_parts_to_command(guest, ["authme", "help"])
        assert result.status is FoundResultStatus.SUCCESS
        assert result.arguments == ()

    def test_alias_keeps_typed_label(self, mapper, admin):
        """Consumed labels are recorded as the user typed them."""
        result = mapper.map_parts_to_command(admin, ["AuthMe", "REG", "bob", "pw"])
        assert result.status is FoundResultStatus.SUCCESS
        assert result.labels == ("AuthMe", "REG")

    def test_nested_command(self, mapper, admin):
        """Descent continues through several category levels."""
        result = mapper.map_parts_to_command(admin, ["authme", "email", "add", "bob@example.org"])
        assert result.status is FoundResultStatus.SUCCESS
        assert path_from(result.command) == ["authme", "email", "add"]
        assert result.arguments == ("bob@example.org",)

    def test_executable_node_stops_descent(self, mapper, guest):
        """Tokens after an executable node are arguments, not labels."""
        result = mapper.map_parts_to_command(guest, ["authme", "help", "register"])
        assert result.status is FoundResultStatus.SUCCESS
        assert result.command.label == "help"
        assert result.arguments == ("register",)

    def test_path_round_trip(self, tree, mapper, admin):
        """Mapping a command's own path always reaches that command."""
        for command in tree.walk():
            result = mapper.map_parts_to_command(admin, path_from(command))
            assert result.command is command


class TestUnknownLabel:
    """Test suggestions for misspelled labels."""

    def test_typo_suggests_closest_child(self, mapper, admin):
        """A transposed label suggests the intended command."""
        result = mapper.map_parts_to_command(admin, ["authme", "regsiter", "bob", "pw"])
        assert result.status is FoundResultStatus.UNKNOWN_LABEL
        assert result.command.label == "register"
        assert result.difference == pytest.approx(0.25)
        assert result.difference <= 0.75
        assert result.labels == ("authme",)
        assert result.arguments == ("regsiter", "bob", "pw")

    def test_suggestion_in_nested_category(self, mapper, admin):
        """Suggestions are made at the level where matching stopped."""
        result = mapper.map_parts_to_command(admin, ["authme", "email", "ad", "x@y.z"])
        assert result.status is FoundResultStatus.UNKNOWN_LABEL
        assert result.command.label == "add"
        assert result.labels == ("authme", "email")

    def test_no_permission_needed_for_suggestion(self, mapper, guest):
        """Unknown labels are reported before any permission check."""
        result = mapper.map_parts_to_command(guest, ["authme", "registr"])
        assert result.status is FoundResultStatus.UNKNOWN_LABEL

    def test_exact_match_beats_fuzzy(self, tree, mapper, admin):
        """A token equal to a child label never yields UNKNOWN_LABEL."""
        authme = tree.find_root("authme")
        for child in authme.children:
            for label in child.labels:
                result = mapper.map_parts_to_command(admin, ["authme", label])
                assert result.status is not FoundResultStatus.UNKNOWN_LABEL

    def test_tie_prefers_first_declared(self):
        """Equally close children resolve to the one declared first."""
        root = CommandDescription(["root"], "Root")
        CommandDescription(["abc"], "First", executable="abc", parent=root)
        CommandDescription(["abd"], "Second", executable="abd", parent=root)
        mapper = CommandMapper(CommandTree([root]), FakePermissions())

        result = mapper.map_parts_to_command(FakeSender("x"), ["root", "abe"])
        assert result.status is FoundResultStatus.UNKNOWN_LABEL
        assert result.command.label == "abc"
        assert result.difference == pytest.approx(1 / 3)

    def test_category_with_executable_takes_arguments(self):
        """A node that can run itself treats unknown tokens as arguments."""
        root = CommandDescription(["tool"], "Tool", executable="tool", unbounded_arguments=True)
        CommandDescription(["sub"], "Sub", executable="sub", parent=root)
        mapper = CommandMapper(CommandTree([root]), FakePermissions())

        result = mapper.map_parts_to_command(FakeSender("x"), ["tool", "subb"])
        assert result.status is FoundResultStatus.SUCCESS
        assert result.command.label == "tool"
        assert result.arguments == ("subb",)


class TestChecks:
    """Test permission and argument count validation."""

    def test_incorrect_argument_count(self, mapper, admin):
        """Too few arguments is reported."""
        result = mapper.map_parts_to_command(admin, ["authme", "register", "bob"])
        assert result.status is FoundResultStatus.INCORRECT_ARGUMENTS
        assert result.command.label == "register"
        assert result.arguments == ("bob",)

    def test_too_many_arguments(self, mapper, guest):
        """Too many arguments is reported."""
        result = mapper.map_parts_to_command(guest, ["login", "a", "b"])
        assert result.status is FoundResultStatus.INCORRECT_ARGUMENTS

    def test_missing_permission(self, mapper, guest):
        """A sender without the permission is refused even with the right arity."""
        result = mapper.map_parts_to_command(guest, ["authme", "register", "bob", "pw"])
        assert result.status is FoundResultStatus.NO_PERMISSION

    def test_permission_checked_before_arity(self, mapper, guest):
        """Unauthorized senders never learn about the expected arity."""
        result = mapper.map_parts_to_command(guest, ["authme", "register", "bob"])
        assert result.status is FoundResultStatus.NO_PERMISSION

    def test_category_alone_is_never_success(self, mapper, admin):
        """Reaching a category node without further labels is an argument error."""
        for parts in (["authme"], ["authme", "email"]):
            result = mapper.map_parts_to_command(admin, parts)
            assert result.status is FoundResultStatus.INCORRECT_ARGUMENTS

    def test_category_permission_is_checked(self):
        """A protected category refuses senders without its permission."""
        root = CommandDescription(["admin"], "Admin", permission="admin.use")
        CommandDescription(["reload"], "Reload", executable="reload", parent=root)
        mapper = CommandMapper(CommandTree([root]), FakePermissions())

        assert mapper.map_parts_to_command(FakeSender("x"), ["admin"]).status is (
            FoundResultStatus.NO_PERMISSION
        )
        allowed = FakeSender("y", {"admin.use"} | ALL_PERMISSIONS)
        assert mapper.map_parts_to_command(allowed, ["admin"]).status is (
            FoundResultStatus.INCORRECT_ARGUMENTS
        )

    def test_resolve_alias(self, mapper, admin):
        """resolve behaves like map_parts_to_command."""
        parts = ["authme", "email", "change", "a", "b"]
        assert mapper.resolve(admin, parts) == mapper.map_parts_to_command(admin, parts)
