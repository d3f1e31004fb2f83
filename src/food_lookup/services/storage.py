"""Persistent key-value store abstractions."""

from dataclasses import dataclass, field
from typing import Protocol


class KeyValueStore(Protocol):
    """Host-supplied byte store used for caches and history."""

    def get(self, key: str) -> bytes | None:
        """Return the stored bytes for a key, if any."""

    def set(self, key: str, value: bytes) -> None:
        """Store bytes under a key, replacing any previous value."""

    def remove(self, key: str) -> None:
        """Delete a key if present."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store used when no persistent backend is configured."""

    values: dict[str, bytes] = field(default_factory=dict)

    def get(self, key: str) -> bytes | None:
        return self.values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)
