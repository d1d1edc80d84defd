# Prefix matching of Interest names against registrations
from typing import Iterable, Optional, TYPE_CHECKING

from ndn.encoding import Name, NonStrictName

from ..utils import same_name

if TYPE_CHECKING:
    from .registrations import Registration


def registration_matches(registration: 'Registration', name: NonStrictName) -> bool:
    """
    A registration accepts ``name`` if its prefix equals the name, or if it has
    ChildInherit set and its prefix is a hierarchical prefix of the name.
    """
    if registration.flags.child_inherit and Name.is_prefix(registration.prefix, name):
        return True
    return same_name(registration.prefix, name)


def find_match(name: NonStrictName, registrations: Iterable['Registration']) -> Optional[int]:
    """
    Return the id of the first registration in iteration order that accepts
    ``name``, or None.

    This is first-match, not longest-prefix-match: with ``/a`` (ChildInherit)
    registered before ``/a/b``, an Interest for ``/a/b`` goes to ``/a``.
    """
    name = Name.normalize(name)
    for registration in registrations:
        if registration_matches(registration, name):
            return registration.id
    return None
