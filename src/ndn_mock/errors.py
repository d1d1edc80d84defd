"""
Exceptions raised by the mock face.

The dispatch engine itself never raises: an Interest nobody answers is a
normal outcome, and removing an unknown response or registration is a no-op.
Only misuse of the face surface ends up here.
"""


class NdnMockError(Exception):
    """Base class for ndn_mock errors."""


class FaceClosedError(NdnMockError):
    """Raised when a face or transport is used after shutdown()."""
