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

"""Configuration management for the registry verifier."""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class VerifierConfig:
    """Configuration class for a single verification run."""
    # paths, relative ones resolve against root_dir
    root_dir: str = "."
    schema_dir: str = "schema"
    data_dir: str = "data"

    # data tree conventions
    index_name: str = "index.json"
    schema_field: str = "$schema"
    data_extensions: Tuple[str, ...] = (".json",)
    hidden_prefix: str = "."
    address_prefix: str = "0x"

    log_level: str = "INFO"
    print_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'VerifierConfig':
        """Create configuration from environment variables."""
        return cls(
            root_dir=os.getenv('REGISTRY_VERIFIER_ROOT', '.'),
            schema_dir=os.getenv('REGISTRY_VERIFIER_SCHEMA_DIR', 'schema'),
            data_dir=os.getenv('REGISTRY_VERIFIER_DATA_DIR', 'data'),
            log_level=os.getenv('REGISTRY_VERIFIER_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('REGISTRY_VERIFIER_PRINT_LEVEL', 'WARNING'),
        )

    @property
    def root_path(self) -> Path:
        return Path(self.root_dir)

    @property
    def schema_path(self) -> Path:
        return self._resolve(self.schema_dir)

    @property
    def data_path(self) -> Path:
        return self._resolve(self.data_dir)

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root_path / candidate

    def set_logging(self, formatter: Optional[logging.Formatter] = None) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('registry_verifier')
