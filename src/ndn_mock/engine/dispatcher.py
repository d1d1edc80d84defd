# Decides who answers an outbound Interest
import logging
from enum import Enum
from typing import Any, Callable

from .packets import Interest
from .registrations import RegistrationManager
from .responses import ResponseTable

logger = logging.getLogger(__name__)


class DispatchOutcome(Enum):
    RESPONSE = 'response'
    HANDLER = 'handler'
    UNANSWERED = 'unanswered'


class Dispatcher:
    """
    Routes each expressed Interest to a canned response or a registered handler.

    The dispatcher only reads the two tables. A canned response always wins over
    a handler for the same name. Handlers are called synchronously and their
    return value is ignored; they answer (if at all) through the face.
    """

    def __init__(
        self,
        responses: ResponseTable,
        registrations: RegistrationManager,
        deliver: Callable[[Any], None]
    ):
        self.responses = responses
        self.registrations = registrations
        self.deliver = deliver

    def handle_request(self, interest: Interest) -> DispatchOutcome:
        name_str = str(interest)

        # one snapshot of both tables; deliver and handler run outside the lock
        registration = None
        with self.registrations.lock:
            response = self.responses.lookup(interest.name)
            if response is None:
                registration = self.registrations.match(interest.name)

        if response is not None:
            logger.info(f"Found response for: {name_str}")
            self.deliver(response)
            return DispatchOutcome.RESPONSE

        if registration is not None:
            logger.info(f"Found handler for: {name_str} (id: {registration.id})")
            registration.handler(registration.prefix, interest, registration.id)
            return DispatchOutcome.HANDLER

        # Not an error: the Interest simply goes unanswered, as it would time out on a real network
        logger.warning(f"No response found for interest (aborting): {name_str}")
        return DispatchOutcome.UNANSWERED
