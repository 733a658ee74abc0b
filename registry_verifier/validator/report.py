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

"""Structured results of a data tree verification."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


class DiagnosticCategory:
    """Kinds of problems reported while walking the data tree."""
    INVALID_JSON = "invalid-json"
    MISSING_SCHEMA_FIELD = "missing-schema-field"
    UNKNOWN_SCHEMA = "unknown-schema"
    SCHEMA_MISMATCH = "schema-mismatch"
    SCHEMA_VIOLATION = "schema-violation"
    INVALID_ADDRESS = "invalid-address"
    NOT_CHECKSUMMED = "not-checksummed"
    NO_CODEOWNERS = "no-codeowners"


@dataclass(frozen=True)
class Diagnostic:
    path: Path
    category: str
    message: str
    # set for schema violations only
    keyword: Optional[str] = None
    data_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['path'] = str(self.path)
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class ValidationReport:
    """Diagnostics collected over a subtree, in traversal order.

    A report is valid exactly when it holds no diagnostics, so merging child
    reports is the logical AND of their results.
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.diagnostics

    def add(
        self,
        path: Path,
        category: str,
        message: str,
        keyword: Optional[str] = None,
        data_path: Optional[str] = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(path, category, message, keyword=keyword, data_path=data_path)
        self.diagnostics.append(diagnostic)
        return diagnostic

    def merge(self, other: 'ValidationReport') -> 'ValidationReport':
        self.diagnostics.extend(other.diagnostics)
        return self

    def by_category(self, category: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.category == category]

    def for_path(self, path: Path) -> List[Diagnostic]:
        path = Path(path)
        return [d for d in self.diagnostics if d.path == path]
