"""
NDN Mock Face

An in-memory Named Data Networking face for testing NDN applications
without a forwarder.
"""

__version__ = "0.1.0"

from .engine import Data, DispatchOutcome, ForwardingFlags, Interest
from .errors import FaceClosedError, NdnMockError
from .face import MockFace, MockTransport, load_fixtures

__all__ = [
    "Data",
    "DispatchOutcome",
    "FaceClosedError",
    "ForwardingFlags",
    "Interest",
    "MockFace",
    "MockTransport",
    "NdnMockError",
    "load_fixtures",
    "__version__",
]
