"""
Data models for uuid7time.

Defines the per-UUID timestamp record, the per-item outcome of a batch run,
and the aggregate batch result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from uuid7time.exceptions import UUID7TimeError


class OutputFormat(str, Enum):
    """Supported output representations."""

    ISO = "iso"
    UNIX = "unix"
    UNIX_MS = "unix-ms"
    JSON = "json"

    @classmethod
    def names(cls) -> list[str]:
        """Return the format names accepted on the command line."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class TimestampRecord:
    """
    Timestamp decoded from a single UUID.

    All renderings describe the same instant; only presentation differs
    between output formats.
    """

    uuid: str
    timestamp_ms: int
    timestamp_sec: int
    iso8601: str
    rfc3339: str

    def to_dict(self) -> dict[str, Any]:
        """Return the record as an ordered dict (JSON field order)."""
        return {
            "uuid": self.uuid,
            "timestamp_ms": self.timestamp_ms,
            "timestamp_sec": self.timestamp_sec,
            "iso8601": self.iso8601,
            "rfc3339": self.rfc3339,
        }


@dataclass(frozen=True)
class ItemResult:
    """Outcome of processing one batch item."""

    index: int
    candidate: str
    record: Optional[TimestampRecord] = None
    output: Optional[str] = None
    error: Optional[UUID7TimeError] = None

    @property
    def ok(self) -> bool:
        """True if the item produced an output line."""
        return self.error is None


@dataclass
class BatchResult:
    """Ordered outcomes of a batch run."""

    items: list[ItemResult] = field(default_factory=list)

    def add(self, item: ItemResult) -> None:
        """Append an item outcome."""
        self.items.append(item)

    @property
    def succeeded(self) -> list[ItemResult]:
        return [item for item in self.items if item.ok]

    @property
    def failed(self) -> list[ItemResult]:
        return [item for item in self.items if not item.ok]

    @property
    def exit_code(self) -> int:
        """0 if every item succeeded, 1 if any failed or there were none."""
        if not self.items or self.failed:
            return 1
        return 0
