"""
Root Pytest Fixtures.

Shared fixtures available to all test types. Every test gets its own
NoteStore; there is no process-wide collection to reset.
"""

from datetime import datetime, timedelta, timezone

import pytest

from notes_api.core.config import get_app_config, get_settings
from notes_api.services.note_store import NoteStore
from notes_api.services.validation import NoteValidator


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def note_store() -> NoteStore:
    """Empty note store."""
    return NoteStore()


@pytest.fixture
def validator() -> NoteValidator:
    """Validator with the default 200 / 5000 limits."""
    return NoteValidator()


class FrozenClock:
    """Manually advanced clock for deterministic timestamps."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FrozenClock:
    """Clock that only moves when told to."""
    return FrozenClock()


@pytest.fixture
def clocked_store(clock: FrozenClock) -> NoteStore:
    """Note store driven by the frozen clock."""
    return NoteStore(clock=clock)


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
