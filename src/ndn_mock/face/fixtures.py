# Preload canned responses from configuration
import logging
from typing import Optional, TYPE_CHECKING

from ..config import Config

if TYPE_CHECKING:
    from .face import MockFace

logger = logging.getLogger(__name__)


def load_fixtures(face: 'MockFace', config: Optional[Config] = None) -> int:
    """
    Add every entry of the ``responses`` config section to ``face``.

    Example config.yaml:

        responses:
          /ndn/ping: pong
          /ndn/edu/hello: "Hello, world"

    Returns the number of responses added.
    """
    config = config or face.config
    responses = config.get_responses()

    if not responses:
        logger.warning("No responses configured in config file!")
        logger.warning("Please configure 'responses' in config.yaml")
        return 0

    logger.debug(f"Responses to load: {list(responses.keys())}")
    for name, content in responses.items():
        if isinstance(content, str):
            content = content.encode()
        face.add_response(name, content)
    logger.info(f"Loaded {len(responses)} canned responses")
    return len(responses)
