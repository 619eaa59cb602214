"""Shared fixtures: an isolated home directory per test."""

import json
import logging
from pathlib import Path

import pytest

from ..config import SwitchSettings
from ..paths import PathResolver
from ..profiles.store import ProfileStore
from ..profiles.switcher import SwitchEngine
from ..service import ProfileSwitchService
from ..storage.atomic import AtomicFileWriter
from ..storage.state import StateStore


class LiveSettings:
    """Helper for reading and writing the live settings document."""

    def __init__(self, path: Path):
        self.path = path

    def write(self, data) -> bytes:
        blob = data if isinstance(data, bytes) else json.dumps(data).encode("utf-8")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(blob)
        return blob

    def read(self) -> bytes:
        return self.path.read_bytes()

    def read_json(self):
        return json.loads(self.read())


@pytest.fixture
def home(tmp_path):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def settings(home):
    return SwitchSettings(home_dir=home)


@pytest.fixture
def resolver(settings):
    return PathResolver(settings)


@pytest.fixture
def writer():
    return AtomicFileWriter()


@pytest.fixture
def state_store(resolver, writer):
    return StateStore(resolver.state_path(), writer=writer)


@pytest.fixture
def profile_store(resolver, state_store, writer):
    return ProfileStore(resolver, state_store, writer=writer)


@pytest.fixture
def engine(resolver, state_store, profile_store, writer):
    return SwitchEngine(resolver, state_store, profile_store, writer=writer)


@pytest.fixture
def service(settings):
    return ProfileSwitchService(settings)


@pytest.fixture
def live(resolver):
    return LiveSettings(resolver.live_path())


@pytest.fixture
def switch_env(home, monkeypatch):
    """Point the environment-driven entry points at the isolated home."""
    for key in (
        "CC_SWITCH_LIVE_SETTINGS_PATH",
        "CC_SWITCH_STORE_DIR",
        "CC_SWITCH_LOG_LEVEL",
        "CC_SWITCH_LOG_CONFIG",
        "CC_SWITCH_LOG_FILE",
        "CC_SWITCH_LOG_CFG",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CC_SWITCH_HOME_DIR", str(home))
    return home


@pytest.fixture
def clean_root_logger():
    """Remove root handlers added during the test and restore the root level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
