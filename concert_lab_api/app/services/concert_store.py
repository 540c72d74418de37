"""
In-memory storage for concerts.

A ``ConcertStore`` maps numeric identifiers to ``ConcertRead`` records
and hands out identifiers from a counter that only ever increases
until ``delete_all`` resets it.  One store is created by the
application factory and shared by every request handler.

Each mutation is individually atomic: dict insertion and ``clear`` are
atomic under the interpreter lock and the counter is advanced and
reset under its own lock.  No lock spans several of these steps, so a
``create`` running concurrently with ``delete_all`` may survive the
clear, or may receive an identifier from the counter before it is
reset.  Callers that need stronger ordering must serialize those
calls themselves.
"""

import datetime
import logging
import threading
from typing import Dict, List

from ..schemas.concert import ConcertRead


logger = logging.getLogger(__name__)


class ConcertNotFound(ValueError):
    """Raised when no concert exists for the requested identifier."""

    def __init__(self, concert_id: int) -> None:
        super().__init__(f"Concert {concert_id} not found")
        self.concert_id = concert_id


class ConcertStore:
    """Thread-safe in-memory concert repository."""

    def __init__(self) -> None:
        self._concerts: Dict[int, ConcertRead] = {}
        self._last_id = 0
        self._counter_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._concerts)

    def _next_id(self) -> int:
        with self._counter_lock:
            self._last_id += 1
            return self._last_id

    def create(self, title: str, date: datetime.date) -> ConcertRead:
        """Store a new concert under the next identifier and return it."""
        concert = ConcertRead(id=self._next_id(), title=title, date=date)
        self._concerts[concert.id] = concert
        logger.info("Created concert %d '%s'", concert.id, concert.title)
        return concert

    def get(self, concert_id: int) -> ConcertRead:
        concert = self._concerts.get(concert_id)
        if concert is None:
            raise ConcertNotFound(concert_id)
        return concert

    def list(self, start: int, size: int) -> List[ConcertRead]:
        """Return the concerts whose ids fall in ``[start, start + size)``.

        ``size`` bounds the identifier range, not the number of concerts
        returned: identifiers in the range that hold no concert are
        skipped.  Only stored identifiers are visited, so the cost does
        not depend on ``size``.  Results are in ascending id order.
        """
        end = start + max(size, 0)
        concerts: List[ConcertRead] = []
        for concert_id in sorted(k for k in tuple(self._concerts) if start <= k < end):
            concert = self._concerts.get(concert_id)
            if concert is not None:
                concerts.append(concert)
        return concerts

    def delete_all(self) -> None:
        """Remove every concert and restart identifiers from 1."""
        self._concerts.clear()
        with self._counter_lock:
            self._last_id = 0
        logger.info("Deleted all concerts")
