"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from valpipe.core.config import get_settings

# Wednesday
FIXED_NOW = datetime(2024, 6, 12, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def clock():
    """Deterministic stand-in for ``datetime.now``."""

    def _clock(tz=None):
        if tz is None:
            return FIXED_NOW.replace(tzinfo=None)
        return FIXED_NOW.astimezone(tz)

    return _clock


@pytest.fixture
def accept_all():
    """Stand-in format checker accepting every string."""
    return lambda value: True


@pytest.fixture
def reject_all():
    """Stand-in format checker rejecting every string."""
    return lambda value: False


@pytest.fixture
def call_log():
    """Predicate factory that records every value it sees."""
    seen = []

    def _recording(result=True):
        def predicate(value):
            seen.append(value)
            return result

        return predicate

    _recording.seen = seen
    return _recording
