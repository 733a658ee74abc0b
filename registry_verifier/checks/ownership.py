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

"""CODEOWNERS lookup for data tree entries."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from codeowners import CodeOwners

logger = logging.getLogger(__name__)


# Locations searched for the CODEOWNERS file, in the order GitHub uses.
CODEOWNERS_LOCATIONS = (
    Path(".github") / "CODEOWNERS",
    Path("CODEOWNERS"),
    Path("docs") / "CODEOWNERS",
)


def find_codeowners_file(root: Path) -> Optional[Path]:
    """Return the first CODEOWNERS file found under ``root``, if any."""
    for location in CODEOWNERS_LOCATIONS:
        candidate = root / location
        if candidate.is_file():
            return candidate
    return None


class OwnershipResolver:
    """Resolve the owners responsible for a path inside a repository."""

    def __init__(self, root: Path, codeowners_text: Optional[str] = None):
        """Initialize the resolver.

        Args:
            root: Repository root; paths are matched relative to it.
            codeowners_text: CODEOWNERS contents. When omitted the file is
                located under ``root``; without one, nothing has an owner.
        """
        self.root = Path(os.path.abspath(root))
        if codeowners_text is None:
            codeowners_file = find_codeowners_file(self.root)
            if codeowners_file is None:
                logger.warning(f"No CODEOWNERS file found under {self.root}")
                codeowners_text = ""
            else:
                logger.debug(f"Using CODEOWNERS file {codeowners_file}")
                codeowners_text = codeowners_file.read_text(encoding="utf-8")
        self._codeowners = CodeOwners(codeowners_text)

    @classmethod
    def from_file(cls, root: Path, codeowners_file: Path) -> 'OwnershipResolver':
        return cls(root, Path(codeowners_file).read_text(encoding="utf-8"))

    def relative_path(self, path: Path) -> str:
        # abspath keeps symlinked entries in place instead of following them
        path = Path(os.path.abspath(path))
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def owners_of(self, path: Path) -> List[Tuple[str, str]]:
        """Return ``(kind, owner)`` pairs for ``path``; empty when unowned."""
        return list(self._codeowners.of(self.relative_path(path)))
