"""
Test configuration and fixtures for the NDN mock face.
"""

import pytest

from ndn_mock.config import Config
from ndn_mock.face import MockFace


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Recorder:
    """Handler and callback stand-in that records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Config read from an isolated file, unaffected by the environment."""
    for var in ('FACE_INTEREST_LIFETIME', 'FACE_FRESHNESS_PERIOD', 'LOGGING_LEVEL', 'LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)
    config_file = tmp_path / 'config.yaml'
    config_file.write_text(
        "face:\n"
        "  interest_lifetime: 4000\n"
        "  freshness_period: 10000\n",
        encoding='utf-8'
    )
    return Config(str(config_file))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def face(config, clock):
    face = MockFace(config=config, clock=clock)
    yield face
    face.shutdown()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    """Factory for extra recorders when a test needs more than one."""
    return Recorder
