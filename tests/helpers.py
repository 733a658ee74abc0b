"""Builders and stubs shared by the test modules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List


# EIP-55 reference vectors
CHECKSUMMED_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
OTHER_CHECKSUMMED_ADDRESS = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"

WIDGET_SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
    },
}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class StaticOwnership:
    """Ownership resolver stub: everything is owned unless listed as unowned."""

    def __init__(self, unowned_names=()):
        self.unowned_names = set(unowned_names)
        self.queried: List[Path] = []

    def owners_of(self, path: Path):
        self.queried.append(Path(path))
        if Path(path).name in self.unowned_names:
            return []
        return [("TEAM", "@registry/maintainers")]
