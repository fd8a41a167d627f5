import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import config  # noqa: E402
from models import ChatEntry  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts (and leaves) with settings re-read from the environment."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def sample_chats():
    """A small chat list, in list order."""
    return [
        ChatEntry(name="Work Team", index=0),
        ChatEntry(name="סבתא", index=1),
        ChatEntry(name="שלום כהן", index=2),
        ChatEntry(name="Shalom Club", index=3),
    ]
