# Pending Interest table of the mock face
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..engine.packets import Data, Interest

OnData = Callable[[Interest, Data], None]
OnTimeout = Callable[[Interest], None]


@dataclass
class PendingInterest:
    id: int
    interest: Interest
    on_data: Optional[OnData]
    on_timeout: Optional[OnTimeout]
    deadline: float


class PendingInterestTable:
    """Pending Interests by id. Ids come from their own counter, separate from registration ids."""

    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock or threading.RLock()
        self._entries: Dict[int, PendingInterest] = {}
        self._last_id = 0

    def add(
        self,
        interest: Interest,
        on_data: Optional[OnData],
        on_timeout: Optional[OnTimeout],
        deadline: float
    ) -> int:
        with self._lock:
            self._last_id += 1
            self._entries[self._last_id] = PendingInterest(
                id=self._last_id,
                interest=interest,
                on_data=on_data,
                on_timeout=on_timeout,
                deadline=deadline
            )
            return self._last_id

    def remove(self, pending_id: int) -> None:
        with self._lock:
            self._entries.pop(pending_id, None)

    def extract_satisfied(self, data: Data) -> List[PendingInterest]:
        """Remove and return every entry whose Interest is satisfied by ``data``."""
        with self._lock:
            satisfied = [e for e in self._entries.values() if e.interest.matches_data(data)]
            for entry in satisfied:
                del self._entries[entry.id]
            return satisfied

    def extract_expired(self, now: float) -> List[PendingInterest]:
        with self._lock:
            expired = [e for e in self._entries.values() if e.deadline <= now]
            for entry in expired:
                del self._entries[entry.id]
            return expired

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, pending_id: int) -> bool:
        with self._lock:
            return pending_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
