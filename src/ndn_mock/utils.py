"""
Utility functions for the NDN mock face.
"""

import sys
import logging

from ndn.encoding import Name, NonStrictName


def setup_logging(level: str = "INFO") -> None:
    """
    Setup basic logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def name_to_str(name: NonStrictName) -> str:
    """Canonical URI form of a name, e.g. ``/ndn/ping``."""
    return Name.to_str(Name.normalize(name))


def same_name(lhs: NonStrictName, rhs: NonStrictName) -> bool:
    return name_to_str(lhs) == name_to_str(rhs)
