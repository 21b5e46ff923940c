"""Store of handshake messages used to compute verify data."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass
class HandshakeCacheItem:
    typ: int
    is_client: bool
    message_sequence: int
    data: bytes


@dataclass(frozen=True)
class PullRule:
    typ: int
    is_client: bool


class HandshakeCache:
    """Thread-safe cache of handshake messages keyed by sequence and side."""

    def __init__(self) -> None:
        self._items: list[HandshakeCacheItem] = []
        self._lock = threading.Lock()

    def push(self, data: bytes, message_sequence: int, typ: int, is_client: bool) -> bool:
        """Store a message; return False if one with that sequence and side exists."""
        with self._lock:
            if any(
                item.message_sequence == message_sequence and item.is_client == is_client
                for item in self._items
            ):
                return False
            self._items.append(
                HandshakeCacheItem(typ, is_client, message_sequence, bytes(data))
            )
            return True

    def pull(self, *rules: PullRule) -> list[HandshakeCacheItem | None]:
        """Return, per rule, the matching item with the highest sequence, or None."""
        with self._lock:
            return [
                max(
                    (
                        item
                        for item in self._items
                        if item.typ == rule.typ and item.is_client == rule.is_client
                    ),
                    key=lambda item: item.message_sequence,
                    default=None,
                )
                for rule in rules
            ]

    def pull_and_merge(self, *rules: PullRule) -> bytes:
        """Concatenate the data of every item that :meth:`pull` finds."""
        return b"".join(item.data for item in self.pull(*rules) if item is not None)