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

"""Custom exceptions for the registry verifier.

Only fatal conditions are raised as exceptions. Problems found while walking
the data tree are collected as diagnostics instead.
"""


class VerifierError(Exception):
    """Base exception for registry-verifier related errors."""
    pass


class SchemaLoadError(VerifierError):
    """Exception raised when a schema file cannot be read, parsed or compiled."""
    pass


class RepositoryRootError(VerifierError):
    """Exception raised when the verifier is not run from a repository root."""
    pass


class DataTreeError(VerifierError):
    """Exception raised when a data directory cannot be listed."""
    pass
