"""Unit tests for input validation (create_frontend_app.validators).

Tests cover:
- validate_project_name (valid/invalid names, length bounds, non-strings)
- project_name_error messages used by the interactive prompt
- sanitize_input (dangerous characters stripped, identity on clean input)
- validate_path (traversal, invalid characters, reserved device names)
"""

from __future__ import annotations

import pytest

from create_frontend_app.validators import (
    project_name_error,
    sanitize_input,
    validate_path,
    validate_project_name,
)

DANGEROUS = ";&|`$(){}[]\\"


# ---------------------------------------------------------------------------
# validate_project_name
# ---------------------------------------------------------------------------


class TestValidateProjectName:
    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["my-app", "my_app", "myapp123", "A", "x" * 50, "-_-"])
    def test_accepts_valid_names(self, name):
        assert validate_project_name(name) is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name", ["", "my app", "my@app", "my.app", "x" * 51, "app/sub", "naïve", "app\n"]
    )
    def test_rejects_invalid_names(self, name):
        assert validate_project_name(name) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 123, ["my-app"], b"my-app"])
    def test_rejects_non_strings(self, value):
        assert validate_project_name(value) is False


class TestProjectNameError:
    @pytest.mark.unit
    def test_valid_name_has_no_error(self):
        assert project_name_error("my-app") is None

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_required(self, value):
        assert project_name_error(value) == "Project name is required."

    @pytest.mark.unit
    def test_too_long(self):
        assert "50 characters or less" in project_name_error("a" * 51)

    @pytest.mark.unit
    def test_bad_characters(self):
        assert "letters, numbers, hyphens, and underscores" in project_name_error("my app")


# ---------------------------------------------------------------------------
# sanitize_input
# ---------------------------------------------------------------------------


class TestSanitizeInput:
    @pytest.mark.unit
    def test_strips_semicolon(self):
        assert sanitize_input("test; rm -rf /") == "test rm -rf /"

    @pytest.mark.unit
    def test_strips_ampersands(self):
        assert sanitize_input('test && echo "hack"') == 'test  echo "hack"'

    @pytest.mark.unit
    def test_clean_input_is_unchanged(self):
        assert sanitize_input("normal-input") == "normal-input"
        assert sanitize_input("npx shadcn-ui@latest init -y") == "npx shadcn-ui@latest init -y"

    @pytest.mark.unit
    def test_removes_every_dangerous_character(self):
        mixed = "a" + DANGEROUS + "b" + DANGEROUS[::-1] + "c"
        result = sanitize_input(mixed)
        assert result == "abc"
        assert not any(ch in result for ch in DANGEROUS)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 123, 4.5, ["a;b"]])
    def test_non_string_returns_empty(self, value):
        assert sanitize_input(value) == ""


# ---------------------------------------------------------------------------
# validate_path
# ---------------------------------------------------------------------------


class TestValidatePath:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path",
        ["my-project", "my/project", "my-project-123", "/tmp/work/app", "C:\\work\\app", "console"],
    )
    def test_accepts_safe_paths(self, path):
        assert validate_path(path) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["../hack", "../../../etc/passwd", "a/../b", "a\\..\\b"])
    def test_rejects_traversal(self, path):
        assert validate_path(path) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("char", list('<>"|?*'))
    def test_rejects_invalid_characters(self, char):
        assert validate_path(f"dir/file{char}name") is False

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path", ["con", "PRN", "/home/user/aux", "C:\\stuff\\Nul", "out/com1", "x/LPT9"]
    )
    def test_rejects_reserved_final_segment(self, path):
        assert validate_path(path) is False

    @pytest.mark.unit
    def test_reserved_name_only_checked_on_final_segment(self):
        assert validate_path("con/app") is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", 42])
    def test_rejects_empty_and_non_strings(self, value):
        assert validate_path(value) is False
