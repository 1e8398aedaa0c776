"""
core/records.py - Base for frozen configuration records.

Records are never mutated after construction; editors derive a new
record per change.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any


class Record:
    """Shared helpers for frozen configuration dataclasses."""

    def with_field(self, name: str, value: Any):
        """Return a copy with one field replaced."""
        return replace(self, **{name: value})

    def _set(self, name: str, value: Any) -> None:
        # Normalization inside __post_init__ of a frozen dataclass
        object.__setattr__(self, name, value)


def with_field(record: Any, name: str, value: Any) -> Any:
    """Functional form of ``record.with_field(name, value)``."""
    return replace(record, **{name: value})
