"""Shared fixtures: throwaway registry repositories built under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from registry_verifier.schema.registry import SchemaRegistry

from .helpers import WIDGET_SCHEMA, StaticOwnership, write_json


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A repository root with a widget schema and an empty data directory."""
    (tmp_path / ".git").mkdir()
    write_json(tmp_path / "schema" / "widget.json", WIDGET_SCHEMA)
    (tmp_path / "data").mkdir()
    (tmp_path / "CODEOWNERS").write_text("* @registry-maintainers\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def registry(repo: Path) -> SchemaRegistry:
    return SchemaRegistry.load(repo / "schema")


@pytest.fixture
def ownership() -> StaticOwnership:
    return StaticOwnership()
