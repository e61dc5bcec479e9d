"""In-memory registry of computed receipt scores."""

from __future__ import annotations

import threading
import uuid


class ScoreStore:
    """
    Maps generated receipt identifiers to their points.
    Entries are insert-only; safe to share between request threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._scores: dict[str, int] = {}

    def assign(self, score: int) -> str:
        """Store `score` under a new random identifier and return the identifier."""
        with self._lock:
            identifier = str(uuid.uuid4())
            while identifier in self._scores:
                identifier = str(uuid.uuid4())
            self._scores[identifier] = score
        return identifier

    def get(self, identifier: str) -> int | None:
        """Return the stored score for the identifier, if any."""
        with self._lock:
            return self._scores.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._scores

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)
