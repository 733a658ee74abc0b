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

"""JSON Schema registry for the data tree.

Every regular file in the schema directory becomes one compiled validator,
keyed by the file name without its extension. Documents name the schema they
follow through a reserved top-level field.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from ..checks.address import AddressChecker
from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)


JsonPointer = str

ADDRESS_FORMAT = "address"


@dataclass(frozen=True)
class SchemaViolation:
    keyword: str
    data_path: JsonPointer
    message: str


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _to_pointer(path) -> JsonPointer:
    return "".join(f"/{_jp_escape(str(token))}" for token in path)


def build_format_checker(address_checker: AddressChecker) -> FormatChecker:
    """Return a checker with every standard format plus ``address``."""
    format_checker = FormatChecker()

    @format_checker.checks(ADDRESS_FORMAT)
    def _is_address(value: Any) -> bool:
        # formats only constrain strings
        if not isinstance(value, str):
            return True
        return address_checker.is_valid(value)

    return format_checker


class SchemaDocument:
    """A compiled schema bound to its identifier."""

    def __init__(self, identifier: str, schema: Any, format_checker: FormatChecker):
        self.identifier = identifier
        self.schema = schema
        if not isinstance(schema, (dict, bool)):
            raise SchemaError(f"Schema must be an object or a boolean, got {type(schema).__name__}")
        # Schemas without a "$schema" keyword are read as draft-07.
        validator_cls = validator_for(schema, default=Draft7Validator)
        validator_cls.check_schema(schema)
        self._validator = validator_cls(schema, format_checker=format_checker)

    def validate(self, data: Any) -> List[SchemaViolation]:
        """Validate ``data``; an empty list means the document conforms."""
        violations = [
            SchemaViolation(
                keyword=str(error.validator),
                data_path=_to_pointer(error.absolute_path),
                message=error.message,
            )
            for error in self._validator.iter_errors(data)
        ]
        violations.sort(key=lambda v: (v.data_path, v.keyword, v.message))
        return violations

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def __repr__(self) -> str:
        return f"SchemaDocument({self.identifier!r})"


class SchemaRegistry:
    """Read-only mapping from schema identifier to :class:`SchemaDocument`."""

    def __init__(self, documents: Optional[Dict[str, SchemaDocument]] = None):
        self._documents: Dict[str, SchemaDocument] = dict(documents or {})

    @classmethod
    def load(cls, schema_dir: Path, address_checker: Optional[AddressChecker] = None) -> 'SchemaRegistry':
        """Load and compile every schema file found in ``schema_dir``.

        Sub-directories and other non-file entries are skipped; there is no
        recursion.

        Raises:
            SchemaLoadError: If the directory cannot be listed, or if any
                schema file is not valid JSON or not a valid JSON Schema.
        """
        schema_dir = Path(schema_dir)
        if address_checker is None:
            address_checker = AddressChecker()
        format_checker = build_format_checker(address_checker)

        try:
            entries = sorted(schema_dir.iterdir())
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema directory {schema_dir}: {e}") from e

        documents: Dict[str, SchemaDocument] = {}
        for entry in entries:
            # lstat: a symlink is not a regular file
            if not entry.is_file() or entry.is_symlink():
                continue
            identifier = entry.stem
            if identifier in documents:
                raise SchemaLoadError(f"Duplicate schema identifier '{identifier}' ({entry})")
            try:
                with open(entry, "r", encoding="utf-8") as f:
                    schema = json.load(f)
                documents[identifier] = SchemaDocument(identifier, schema, format_checker)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError, SchemaError) as e:
                raise SchemaLoadError(f'"{entry}" is not a valid schema.') from e
            logger.debug(f"Loaded schema '{identifier}' from {entry}")

        logger.debug(f"Loaded {len(documents)} schema(s) from {schema_dir}")
        return cls(documents)

    def lookup(self, identifier: Any) -> Optional[SchemaDocument]:
        """Return the schema registered under ``identifier``, or None."""
        if not isinstance(identifier, str):
            return None
        return self._documents.get(identifier)

    @property
    def identifiers(self) -> Tuple[str, ...]:
        return tuple(sorted(self._documents))

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)


def load_registry(schema_dir: Path, address_checker: Optional[AddressChecker] = None) -> SchemaRegistry:
    """Shorthand for :meth:`SchemaRegistry.load`."""
    return SchemaRegistry.load(schema_dir, address_checker)
