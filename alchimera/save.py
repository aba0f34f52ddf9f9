"""Versioned save-data container."""

from __future__ import annotations

import json
from dataclasses import dataclass

CURRENT_SAVE_VERSION = 1


class SaveError(Exception):
    """Raised when save data has an unsupported schema version."""

    def __init__(self, found: int, supported: int) -> None:
        super().__init__(
            f"unsupported save version {found}; supported version is {supported}"
        )
        self.found = found
        self.supported = supported


@dataclass(frozen=True)
class SaveData:
    """Minimal top-level save container."""

    world_seed_label: str
    version: int = CURRENT_SAVE_VERSION

    def validate_version(self) -> None:
        """Raise SaveError unless the version is the current one."""
        if self.version != CURRENT_SAVE_VERSION:
            raise SaveError(self.version, CURRENT_SAVE_VERSION)

    def to_json(self) -> str:
        """Encode as compact JSON."""
        return json.dumps(
            {"version": self.version, "world_seed_label": self.world_seed_label},
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, text: str) -> SaveData:
        """Decode from JSON; raises ValueError for malformed documents."""
        document = json.loads(text)
        if not isinstance(document, dict):
            raise ValueError("save data must be a JSON object")
        try:
            version = document["version"]
            label = document["world_seed_label"]
        except KeyError as error:
            raise ValueError(f"missing field {error.args[0]}") from error
        if isinstance(version, bool) or not isinstance(version, int) or not 0 <= version < 2**32:
            raise ValueError("version must be an unsigned 32-bit integer")
        if not isinstance(label, str):
            raise ValueError("world_seed_label must be a string")
        return cls(world_seed_label=label, version=version)