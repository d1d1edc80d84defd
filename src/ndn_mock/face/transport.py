# In-memory transport standing in for the socket to a forwarder
import logging
from collections import deque
from typing import Deque, List

from ..engine.packets import Data, Interest
from ..errors import FaceClosedError

logger = logging.getLogger(__name__)


class MockTransport:
    """
    Records outbound Interests and buffers inbound Data.

    respond_with() is the delivery sink used by the dispatcher and by
    MockFace.put_data(): queued Data is handed to pending Interests on the next
    MockFace.process_events(), exactly as if it had arrived from a forwarder.
    """

    def __init__(self):
        self.sent_interests: List[Interest] = []
        self._inbound: Deque[Data] = deque()
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def send(self, interest: Interest) -> None:
        self._check_open()
        self.sent_interests.append(interest)
        logger.debug(f"Sent Interest: {interest}")

    def respond_with(self, data: Data) -> None:
        self._check_open()
        self._inbound.append(data)
        logger.debug(f"Queued Data: {data}, Content length: {len(data.content)} bytes")

    def receive(self) -> List[Data]:
        """Drain and return everything queued so far."""
        received = list(self._inbound)
        self._inbound.clear()
        return received

    def close(self) -> None:
        if not self._closed:
            self._inbound.clear()
            self._closed = True
            logger.debug("Transport closed")

    def _check_open(self) -> None:
        if self._closed:
            raise FaceClosedError("Transport is closed")
