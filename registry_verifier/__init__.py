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

"""Verify a registry's JSON data tree against its schemas and CODEOWNERS."""

__version__ = "0.1.0"

from .checks import AddressChecker, OwnershipResolver
from .config import VerifierConfig
from .exceptions import DataTreeError, RepositoryRootError, SchemaLoadError, VerifierError
from .schema import SchemaDocument, SchemaRegistry, SchemaViolation
from .validator import Diagnostic, DiagnosticCategory, TreeValidator, ValidationReport, validate_tree

__all__ = [
    'AddressChecker',
    'DataTreeError',
    'Diagnostic',
    'DiagnosticCategory',
    'OwnershipResolver',
    'RepositoryRootError',
    'SchemaDocument',
    'SchemaLoadError',
    'SchemaRegistry',
    'SchemaViolation',
    'TreeValidator',
    'ValidationReport',
    'VerifierConfig',
    'VerifierError',
    'validate_tree',
]
