"""
Request-dispatch engine: response table, handler table, prefix matcher and dispatcher.
"""

from .dispatcher import Dispatcher, DispatchOutcome
from .matcher import find_match
from .packets import Data, Interest
from .registrations import ForwardingFlags, OnInterest, Registration, RegistrationManager
from .responses import ResponseTable

__all__ = [
    'Data',
    'Dispatcher',
    'DispatchOutcome',
    'ForwardingFlags',
    'Interest',
    'OnInterest',
    'Registration',
    'RegistrationManager',
    'ResponseTable',
    'find_match',
]
