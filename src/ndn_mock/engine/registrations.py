# Handler table: prefix registrations addressed by id
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from ndn.encoding import Name, FormalName, NonStrictName

from ..utils import name_to_str
from .matcher import find_match

if TYPE_CHECKING:
    from .packets import Interest

logger = logging.getLogger(__name__)

# handler(prefix, interest, registered_prefix_id); the return value is ignored
OnInterest = Callable[[FormalName, 'Interest', int], Any]


@dataclass(frozen=True)
class ForwardingFlags:
    """Match-control flags of a registration. ChildInherit is on by default, as in NFD."""
    child_inherit: bool = True


@dataclass
class Registration:
    id: int
    prefix: FormalName
    handler: OnInterest
    flags: ForwardingFlags = field(default_factory=ForwardingFlags)


class RegistrationManager:
    """
    Owns the handler table and the registration id counter.

    Ids start at 1 and are never reused, even after unregister(). The table is
    a plain dict, so iteration (and therefore tie-breaking in match()) follows
    registration order.
    """

    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock or threading.RLock()
        self._registrations: Dict[int, Registration] = {}
        self._last_id = 0

    def register(
        self,
        prefix: NonStrictName,
        handler: OnInterest,
        flags: Optional[ForwardingFlags] = None
    ) -> int:
        flags = flags or ForwardingFlags()
        with self._lock:
            self._last_id += 1
            registration_id = self._last_id
            self._registrations[registration_id] = Registration(
                id=registration_id,
                prefix=Name.normalize(prefix),
                handler=handler,
                flags=flags
            )
        logger.debug(f"Registered prefix: {name_to_str(prefix)} (id: {registration_id}, child_inherit: {flags.child_inherit})")
        return registration_id

    def unregister(self, registration_id: int) -> None:
        with self._lock:
            registration = self._registrations.pop(registration_id, None)
        if registration is not None:
            logger.debug(f"Removed registered prefix: {name_to_str(registration.prefix)} (id: {registration_id})")

    @property
    def lock(self) -> threading.RLock:
        """Guards the table; the face shares it with its other tables."""
        return self._lock

    def get(self, registration_id: int) -> Optional[Registration]:
        with self._lock:
            return self._registrations.get(registration_id)

    def match(self, name: NonStrictName) -> Optional[Registration]:
        """First registration accepting ``name``, see find_match()."""
        with self._lock:
            registration_id = find_match(name, self._registrations.values())
            if registration_id is None:
                return None
            return self._registrations[registration_id]

    def registrations(self) -> List[Registration]:
        with self._lock:
            return list(self._registrations.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)
