# Canned responses keyed by exact name
import logging
import threading
from typing import Any, Dict, Optional

from ndn.encoding import NonStrictName

from ..utils import name_to_str

logger = logging.getLogger(__name__)


class ResponseTable:
    """
    Exact-name -> response mapping.

    Keys are the canonical URI of the name, so ``/a/b`` and ``['a', 'b']``
    address the same entry. There are no prefix semantics here: a response
    stored for ``/a`` never answers ``/a/b``.
    """

    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock or threading.RLock()
        self._responses: Dict[str, Any] = {}

    def put(self, name: NonStrictName, response: Any) -> None:
        key = name_to_str(name)
        with self._lock:
            self._responses[key] = response
        logger.debug(f"Added response for: {key}")

    def remove(self, name: NonStrictName) -> None:
        key = name_to_str(name)
        with self._lock:
            removed = self._responses.pop(key, None) is not None
        if removed:
            logger.debug(f"Removed response for: {key}")

    def lookup(self, name: NonStrictName) -> Optional[Any]:
        key = name_to_str(name)
        with self._lock:
            return self._responses.get(key)

    def __contains__(self, name: NonStrictName) -> bool:
        return self.lookup(name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._responses)
