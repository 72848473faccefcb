import os

import pytest

from passgen import settings_manager
from passgen.random_provider import RandomProvider


class ScriptedRandom(RandomProvider):
    """Returns pre-recorded values and remembers every bound it was asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def get(self, bound):
        self.bounds.append(bound)
        if not self.values:
            raise AssertionError(f"Unexpected draw with bound {bound}")
        return self.values.pop(0)


class ZeroRandom(RandomProvider):
    """Always draws 0, the smallest legal value."""

    def get(self, bound):
        return 0


class FailingRandom(RandomProvider):
    """Succeeds for the first `after` draws, then raises."""

    def __init__(self, after=0, exc=None):
        self.after = after
        self.exc = exc or OSError("entropy source unavailable")
        self.calls = 0

    def get(self, bound):
        if self.calls >= self.after:
            raise self.exc
        self.calls += 1
        return 0


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def failing():
    return FailingRandom


@pytest.fixture
def zero_random():
    return ZeroRandom()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolates every test from PASSGEN_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith(settings_manager.ENV_PREFIX):
            monkeypatch.delenv(key)
    monkeypatch.setattr(settings_manager, "load_dotenv", lambda *args, **kwargs: False)
    settings_manager.clear_cache()
    yield
    settings_manager.clear_cache()
