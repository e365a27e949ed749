"""
- Provide a scripted random source so secrets are predictable
- Provide a store_with_secret factory: store_with_secret([1,2,3,4]) gives a GameStore
  whose next game has exactly that secret
- Keep env knobs from a developer's .env out of the tests
"""

import pytest

from codebreaker.store import GameStore


class ScriptedSource:
    """Random source that hands out a fixed sequence of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.values.pop(0)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("CODEBREAKER_SEED", "CODEBREAKER_DIFFICULTY", "CODEBREAKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def store_with_secret():
    def _make(*secrets):
        values = []
        for secret in secrets:
            values.extend(secret)
        return GameStore(source=ScriptedSource(values))
    return _make
