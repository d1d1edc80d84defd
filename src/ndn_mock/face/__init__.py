"""
In-memory face for exercising NDN client code without a forwarder.
"""

from .face import MockFace
from .fixtures import load_fixtures
from .pending import OnData, OnTimeout, PendingInterest, PendingInterestTable
from .transport import MockTransport

__all__ = [
    'MockFace',
    'MockTransport',
    'OnData',
    'OnTimeout',
    'PendingInterest',
    'PendingInterestTable',
    'load_fixtures',
]
