"""Tests for expressgen.scaffold.names."""

from __future__ import annotations

import pytest

from expressgen.exceptions import InvalidUsageError
from expressgen.scaffold.names import validate_project_name, validate_resource_name


class TestResourceName:
    @pytest.mark.parametrize("name", ["user", "User", "order_item", "$store", "_x", "v2"])
    def test_accepts_identifiers(self, name: str) -> None:
        assert validate_resource_name(name) == name

    @pytest.mark.parametrize("name", ["", "2fa", "order-item", "a b", "../evil", "user.js"])
    def test_rejects_non_identifiers(self, name: str) -> None:
        with pytest.raises(InvalidUsageError):
            validate_resource_name(name)

    def test_error_exit_code(self) -> None:
        with pytest.raises(InvalidUsageError) as info:
            validate_resource_name("bad-name")
        assert info.value.exit_code == 2


class TestProjectName:
    @pytest.mark.parametrize("name", ["demo", "my-app", "My App", "app.v2"])
    def test_accepts_directory_names(self, name: str) -> None:
        assert validate_project_name(name) == name

    @pytest.mark.parametrize("name", ["", "  ", ".", "..", "a/b", "a\\b"])
    def test_rejects_paths(self, name: str) -> None:
        with pytest.raises(InvalidUsageError):
            validate_project_name(name)
