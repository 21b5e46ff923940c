"""Handshake flights and the shared flight state of a connection."""

from __future__ import annotations

import enum
import queue
import threading


class Flight(enum.IntEnum):
    """A group of handshake messages sent and retransmitted together."""

    FLIGHT0 = 1
    FLIGHT1 = 2
    FLIGHT2 = 3
    FLIGHT3 = 4
    FLIGHT4 = 5
    FLIGHT5 = 6
    FLIGHT6 = 7

    def __str__(self) -> str:
        return f"Flight {self.value - 1}"


class FlightState:
    """Current flight of one side, with a one-slot trigger for the sender."""

    def __init__(self, is_client: bool) -> None:
        self._lock = threading.Lock()
        self._value = Flight.FLIGHT1 if is_client else Flight.FLIGHT0
        self._trigger: queue.Queue[None] = queue.Queue(maxsize=1)

    @property
    def current(self) -> Flight:
        with self._lock:
            return self._value

    def transition(self, flight: Flight) -> None:
        """Move to ``flight`` and wake the sender if it is not already woken."""
        with self._lock:
            self._value = Flight(flight)
        try:
            self._trigger.put_nowait(None)
        except queue.Full:
            pass

    def wait_for_trigger(self, timeout: float | None) -> bool:
        """Wait for a pending trigger; return True if one was consumed."""
        try:
            self._trigger.get(timeout=timeout)
        except queue.Empty:
            return False
        return True