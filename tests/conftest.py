"""Shared test fixtures."""

from pathlib import Path

import pytest

from mediafrag.config import PlayerConfig
from mediafrag.events import LocalEventBus
from mediafrag.media import SimulatedMedia

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path() -> Path:
    return FIXTURES_DIR / "sample_config.json"


@pytest.fixture
def bus() -> LocalEventBus:
    return LocalEventBus()


@pytest.fixture
def config() -> PlayerConfig:
    return PlayerConfig()


@pytest.fixture
def media() -> SimulatedMedia:
    return SimulatedMedia(duration=60.0)
