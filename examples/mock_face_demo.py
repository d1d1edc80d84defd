"""
Minimal demo of the in-memory NDN face.

This demo shows:
1. A canned response answering an Interest
2. A prefix handler answering Interests below its prefix
3. An unanswered Interest timing out

Usage:
    python examples/mock_face_demo.py [--config=path/to/config.yaml]
"""
import asyncio
import sys
import logging
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from ndn.encoding import Name
from ndn.types import InterestTimeout

from ndn_mock import MockFace, load_fixtures
from ndn_mock.config import get_config
from ndn_mock.utils import setup_logging

logger = logging.getLogger(__name__)


async def run_demo(face: MockFace):
    logger.info("=" * 50)
    logger.info("Mock face demo")
    logger.info("=" * 50)

    face.add_response('/ndn/ping', b'pong')

    @face.route('/demo/echo')
    def echo(prefix, interest, registered_prefix_id):
        payload = Name.to_str(interest.name)[len(Name.to_str(prefix)):]
        face.put_data(interest.name, f"echo: {payload}")

    for interest_name in ['/ndn/ping', '/demo/echo/hello', '/nobody/home']:
        logger.info(f"\nSending Interest: {interest_name}")
        try:
            data = await face.express_interest_async(interest_name)
            logger.info(f"Received content: {data.content.decode()}")
        except InterestTimeout:
            logger.warning(f"No Data received for {interest_name}")

    logger.info("=" * 50)
    logger.info("Demo completed")


def main():
    config_path = None
    if len(sys.argv) > 1 and sys.argv[1].startswith('--config='):
        config_path = sys.argv[1].split('=', 1)[1]

    config = get_config(config_path)
    setup_logging(config.get_log_level())

    face = MockFace(config=config)
    load_fixtures(face)
    try:
        asyncio.run(run_demo(face))
    finally:
        face.shutdown()


if __name__ == '__main__':
    main()
