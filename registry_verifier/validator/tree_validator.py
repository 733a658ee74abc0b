# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Recursive verification of the data tree.

Each directory is walked in listing order. Every entry is classified once as
a data document, a directory or anything else, checked accordingly, and then
checked for ownership. Results are combined bottom-up: a subtree is valid only
when no entry inside it produced a diagnostic. Traversal never stops early, so
one run reports every problem in the tree.
"""

from __future__ import annotations

import json
import logging
import stat
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Optional

from ..checks.address import AddressChecker
from ..config import VerifierConfig
from ..exceptions import DataTreeError
from ..schema.registry import SchemaRegistry
from .report import DiagnosticCategory, ValidationReport

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def classify_entry(path: Path, data_extensions: Iterable[str]) -> EntryKind:
    """Classify ``path`` without following symlinks.

    Only regular files carrying one of ``data_extensions`` count as data
    documents; everything that is neither such a file nor a directory is
    OTHER.
    """
    try:
        mode = path.lstat().st_mode
    except OSError:
        return EntryKind.OTHER
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode) and path.suffix in tuple(data_extensions):
        return EntryKind.FILE
    return EntryKind.OTHER


def _reject_constant(value: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {value}")


def is_blank(value: Any) -> bool:
    """Return True for values that do not name a schema: null, false, 0 and ""."""
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return value == ""


def load_document(path: Path) -> Any:
    """Read and parse a JSON document.

    NaN and Infinity are rejected since they are not part of JSON.

    Raises:
        OSError, ValueError: If the file cannot be read or parsed.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f, parse_constant=_reject_constant)


class TreeValidator:
    """Validate a data tree against a schema registry."""

    def __init__(
        self,
        registry: SchemaRegistry,
        ownership_resolver,
        address_checker: Optional[AddressChecker] = None,
        config: Optional[VerifierConfig] = None,
    ):
        """Initialize the tree validator.

        Args:
            registry: Loaded schemas, queried once per data document
            ownership_resolver: Object with ``owners_of(path)`` returning the
                owners of a path (empty when unowned)
            address_checker: Checker for address-named directories
            config: Naming conventions of the data tree
        """
        self.registry = registry
        self.ownership_resolver = ownership_resolver
        self.address_checker = address_checker or AddressChecker()
        self.config = config or VerifierConfig()

    def validate(self, directory: Path) -> ValidationReport:
        """Validate every entry below ``directory``.

        The directory itself is not checked; its parent does that.

        Raises:
            DataTreeError: If a directory in the tree cannot be listed.
        """
        directory = Path(directory)
        logger.debug(f"Validating directory {directory}")
        report = ValidationReport()
        for entry in self._list_entries(directory):
            if self.is_skipped(entry.name):
                continue
            report.merge(self.validate_entry(entry))
        return report

    def validate_entry(self, entry: Path) -> ValidationReport:
        """Validate a single entry, recursing when it is a directory."""
        report = ValidationReport()
        kind = classify_entry(entry, self.config.data_extensions)

        if kind is EntryKind.FILE:
            self._check_document(entry, report)
        elif kind is EntryKind.DIRECTORY:
            self._check_address_name(entry, report)
            report.merge(self.validate(entry))

        self._check_ownership(entry, report)
        return report

    def is_skipped(self, name: str) -> bool:
        return name.startswith(self.config.hidden_prefix) or name == self.config.index_name

    def _list_entries(self, directory: Path) -> List[Path]:
        try:
            return list(directory.iterdir())
        except OSError as e:
            raise DataTreeError(f"Cannot read data directory {directory}: {e}") from e

    def _check_document(self, path: Path, report: ValidationReport) -> None:
        try:
            data = load_document(path)
        except (OSError, ValueError):
            data = None
        if data is None:
            # a bare null has no fields to look up
            report.add(path, DiagnosticCategory.INVALID_JSON, f'"{path}" is not a valid JSON file.')
            return

        field = self.config.schema_field
        schema_id = data.get(field) if isinstance(data, dict) else None
        if is_blank(schema_id):
            report.add(
                path,
                DiagnosticCategory.MISSING_SCHEMA_FIELD,
                f'"{path}" is not a valid JSON file ("{field}" is not present).',
            )
            return

        schema = self.registry.lookup(schema_id)
        if schema is None:
            report.add(
                path,
                DiagnosticCategory.UNKNOWN_SCHEMA,
                f'"{path}" is not a valid JSON file ("{schema_id}" is not a valid schema).',
            )
            return

        violations = schema.validate(data)
        if not violations:
            return
        report.add(
            path,
            DiagnosticCategory.SCHEMA_MISMATCH,
            f'"{path}" does not follow "{schema.identifier}" schema:',
        )
        for violation in violations:
            report.add(
                path,
                DiagnosticCategory.SCHEMA_VIOLATION,
                violation.message,
                keyword=violation.keyword,
                data_path=violation.data_path,
            )

    def _check_address_name(self, path: Path, report: ValidationReport) -> None:
        name = path.name
        if not name.startswith(self.config.address_prefix):
            return
        if not self.address_checker.is_valid(name):
            report.add(path, DiagnosticCategory.INVALID_ADDRESS, f'"{name}" is not a valid address. ("{path}")')
        elif self.address_checker.to_checksum(name) != name:
            report.add(path, DiagnosticCategory.NOT_CHECKSUMMED, f'"{name}" is not checksummed. ("{path}")')

    def _check_ownership(self, path: Path, report: ValidationReport) -> None:
        if not self.ownership_resolver.owners_of(path):
            report.add(path, DiagnosticCategory.NO_CODEOWNERS, f'"{path}" has no codeowners.')


def validate_tree(
    directory: Path,
    registry: SchemaRegistry,
    ownership_resolver,
    address_checker: Optional[AddressChecker] = None,
    config: Optional[VerifierConfig] = None,
) -> ValidationReport:
    """Validate the data tree rooted at ``directory``."""
    validator = TreeValidator(registry, ownership_resolver, address_checker, config)
    return validator.validate(directory)
