# Mock face: an NDN endpoint held entirely in memory
import logging
import threading
import time
from typing import Callable, Optional, Union

from ndn.encoding import Name, InterestParam, NonStrictName
from ndn.types import InterestTimeout

from ..config import Config, get_config
from ..engine import (
    Data,
    Dispatcher,
    DispatchOutcome,
    ForwardingFlags,
    Interest,
    OnInterest,
    RegistrationManager,
    ResponseTable,
)
from ..errors import FaceClosedError
from ..utils import name_to_str, same_name
from .pending import OnData, OnTimeout, PendingInterestTable
from .transport import MockTransport

logger = logging.getLogger(__name__)


class MockFace:
    """
    Face that answers Interests from local tables instead of the network.

    Expressing an Interest records it as pending and dispatches it at once:
    a canned response (add_response) wins, otherwise the first matching
    registered handler (register_prefix / route) is called. Any Data produced
    is queued on the transport and reaches ``on_data`` on the next
    process_events(), like Data read from a real forwarder.

    Not thread-safe by contract: call process_events() from the thread that
    expresses Interests. The tables still share one lock so that a handler
    may register, unregister or put_data from inside a dispatch.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[MockTransport] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        self.config = config or get_config()
        self.transport = transport or MockTransport()
        self._clock = clock or time.monotonic
        self._lock = threading.RLock()
        self.responses = ResponseTable(self._lock)
        self.registrations = RegistrationManager(self._lock)
        self.pending = PendingInterestTable(self._lock)
        self.dispatcher = Dispatcher(self.responses, self.registrations, self.transport.respond_with)
        self.last_outcome: Optional[DispatchOutcome] = None

    # Responses

    def add_response(
        self,
        name: NonStrictName,
        response: Union[Data, bytes, str, int],
        freshness_period: Optional[int] = None
    ) -> None:
        """
        Answer every future Interest for exactly ``name`` with ``response``.

        Preempts registered handlers for that name. ``response`` is either a
        ready Data packet or its content.
        """
        if not isinstance(response, Data):
            response = self._make_data(name, response, freshness_period)
        elif not same_name(response.name, name):
            raise ValueError(f"Data name {response} does not match response name {name_to_str(name)}")
        self.responses.put(name, response)

    def remove_response(self, name: NonStrictName) -> None:
        self.responses.remove(name)

    # Registrations

    def register_prefix(
        self,
        prefix: NonStrictName,
        handler: OnInterest,
        child_inherit: bool = True
    ) -> int:
        """Register ``handler`` for ``prefix``. Returns the registered prefix id."""
        self._check_open()
        registration_id = self.registrations.register(prefix, handler, ForwardingFlags(child_inherit=child_inherit))
        mode_str = "prefix" if child_inherit else "exact"
        logger.info(f"Registered route: {name_to_str(prefix)} (mode: {mode_str}, id: {registration_id})")
        return registration_id

    def route(self, prefix: NonStrictName, child_inherit: bool = True):
        """Decorator form of register_prefix()."""
        def decorator(func: OnInterest) -> OnInterest:
            self.register_prefix(prefix, func, child_inherit=child_inherit)
            return func
        return decorator

    def remove_registered_prefix(self, registered_prefix_id: int) -> None:
        self.registrations.unregister(registered_prefix_id)

    # Interests

    def express_interest(
        self,
        name: NonStrictName,
        on_data: Optional[OnData] = None,
        on_timeout: Optional[OnTimeout] = None,
        lifetime: Optional[int] = None,
        can_be_prefix: bool = False,
        must_be_fresh: bool = False,
        app_param: Optional[bytes] = None
    ) -> int:
        """
        Express an Interest and dispatch it locally. Returns the pending Interest id.

        Handlers run before this returns; their Data, like canned responses,
        is delivered to ``on_data`` by process_events().
        """
        self._check_open()
        if lifetime is None:
            lifetime = self.config.get_interest_lifetime()
        interest = Interest(
            name=Name.normalize(name),
            param=InterestParam(
                lifetime=lifetime,
                can_be_prefix=can_be_prefix,
                must_be_fresh=must_be_fresh
            ),
            app_param=app_param
        )
        pending_id = self.pending.add(interest, on_data, on_timeout, self._clock() + lifetime / 1000)
        logger.info(f"Expressing Interest: {interest} (pending id: {pending_id})")
        try:
            self.transport.send(interest)
            self.last_outcome = self.dispatcher.handle_request(interest)
        except BaseException:
            # the caller never sees pending_id, so nothing may time out later
            self.pending.remove(pending_id)
            raise
        return pending_id

    async def express_interest_async(
        self,
        name: NonStrictName,
        lifetime: Optional[int] = None,
        can_be_prefix: bool = False,
        must_be_fresh: bool = False,
        app_param: Optional[bytes] = None
    ) -> Data:
        """
        Coroutine form of express_interest() for code written against NDNApp.

        Dispatches, processes events once and returns the Data. Raises
        InterestTimeout right away if nothing answered: there is no network
        to wait for.
        """
        received = []
        pending_id = self.express_interest(
            name,
            on_data=lambda _interest, data: received.append(data),
            lifetime=lifetime,
            can_be_prefix=can_be_prefix,
            must_be_fresh=must_be_fresh,
            app_param=app_param
        )
        self.process_events()
        if not received:
            self.remove_pending_interest(pending_id)
            logger.error(f"Interest timeout for '{name_to_str(name)}' (no local responder)")
            raise InterestTimeout()
        return received[0]

    def remove_pending_interest(self, pending_id: int) -> None:
        self.pending.remove(pending_id)

    # Data

    def put_data(
        self,
        name: NonStrictName,
        content: Union[bytes, str] = b'',
        freshness_period: Optional[int] = None
    ) -> Data:
        """Send Data back towards pending Interests; what handlers call to answer."""
        self._check_open()
        data = self._make_data(name, content, freshness_period)
        logger.info(f"Sending Data: {data}, Content length: {len(data.content)} bytes")
        self.transport.respond_with(data)
        return data

    # Event processing

    def process_events(self) -> int:
        """
        Deliver queued Data to matching pending Interests, then time out expired ones.

        Returns the number of callbacks invoked. Callback exceptions propagate.
        """
        self._check_open()
        invoked = 0
        for data in self.transport.receive():
            satisfied = self.pending.extract_satisfied(data)
            if not satisfied:
                logger.debug(f"Dropped unsolicited Data: {data}")
            for entry in satisfied:
                logger.info(f"Received Data: {data} for Interest: {entry.interest}")
                if entry.on_data is not None:
                    entry.on_data(entry.interest, data)
                    invoked += 1

        for entry in self.pending.extract_expired(self._clock()):
            logger.warning(f"Interest timeout for '{entry.interest}' (lifetime: {entry.interest.param.lifetime}ms)")
            if entry.on_timeout is not None:
                entry.on_timeout(entry.interest)
                invoked += 1
        return invoked

    def shutdown(self) -> None:
        if self.transport.is_closed:
            return
        self.pending.clear()
        self.transport.close()
        logger.info("Mock face shut down")

    def _make_data(
        self,
        name: NonStrictName,
        content: Union[bytes, str, int, None],
        freshness_period: Optional[int]
    ) -> Data:
        if content is None:
            content = b''
        elif isinstance(content, (bytes, bytearray, memoryview)):
            content = bytes(content)
        else:
            # YAML scalars such as 42 or true arrive as int/bool
            content = str(content).encode()
        if freshness_period is None:
            freshness_period = self.config.get_freshness_period()
        return Data(name=Name.normalize(name), content=content, freshness_period=freshness_period)

    def _check_open(self) -> None:
        if self.transport.is_closed:
            raise FaceClosedError("Face has been shut down")
