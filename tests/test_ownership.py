"""Tests for registry_verifier.checks.ownership against real CODEOWNERS files."""

from __future__ import annotations

from pathlib import Path

from registry_verifier.checks.ownership import OwnershipResolver, find_codeowners_file
from registry_verifier.schema.registry import SchemaRegistry
from registry_verifier.validator.report import DiagnosticCategory
from registry_verifier.validator.tree_validator import validate_tree

from .helpers import write_json


def test_find_codeowners_prefers_github_directory(tmp_path: Path):
    assert find_codeowners_file(tmp_path) is None

    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "CODEOWNERS").write_text("* @docs\n", encoding="utf-8")
    assert find_codeowners_file(tmp_path) == tmp_path / "docs" / "CODEOWNERS"

    (tmp_path / "CODEOWNERS").write_text("* @root\n", encoding="utf-8")
    assert find_codeowners_file(tmp_path) == tmp_path / "CODEOWNERS"

    (tmp_path / ".github").mkdir()
    (tmp_path / ".github" / "CODEOWNERS").write_text("* @github\n", encoding="utf-8")
    assert find_codeowners_file(tmp_path) == tmp_path / ".github" / "CODEOWNERS"


def test_owners_are_matched_relative_to_root(tmp_path: Path):
    resolver = OwnershipResolver(tmp_path, "*.json @alice\n")

    assert resolver.relative_path(tmp_path / "data" / "a.json") == "data/a.json"
    assert ("USERNAME", "@alice") in resolver.owners_of(tmp_path / "data" / "a.json")
    assert resolver.owners_of(tmp_path / "data" / "notes.txt") == []


def test_resolver_reads_codeowners_from_root(repo: Path):
    resolver = OwnershipResolver(repo)

    assert resolver.owners_of(repo / "data" / "anything.json")


def test_missing_codeowners_means_no_owners(tmp_path: Path):
    resolver = OwnershipResolver(tmp_path)

    assert resolver.owners_of(tmp_path / "data" / "a.json") == []


def test_unowned_directory_is_reported(repo: Path):
    data = repo / "data"
    write_json(data / "a.json", {"$schema": "widget", "name": "x"})
    write_json(data / "sub" / "b.json", {"$schema": "widget", "name": "y"})
    resolver = OwnershipResolver(repo, "*.json @alice\n")

    report = validate_tree(data, SchemaRegistry.load(repo / "schema"), resolver)

    assert [(d.path, d.category) for d in report.diagnostics] == [
        (data / "sub", DiagnosticCategory.NO_CODEOWNERS),
    ]
