import os

import pytest

from runulator.store.memory import MemoryStore
from tests._factories import RunFactory, UserSettingsFactory


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep RUNULATOR_* variables of the developer's shell out of the tests.

    The env loader reads these variables (and a .env file). Tests that need them set
    them explicitly with monkeypatch.
    """
    for var in list(os.environ):
        if var.startswith("RUNULATOR_"):
            monkeypatch.delenv(var)
    # Point the .env lookup at a file that doesn't exist.
    monkeypatch.setenv("RUNULATOR_ENV_FILE", os.devnull + ".missing")
    yield


@pytest.fixture(scope="session")
def run_factory() -> RunFactory:
    return RunFactory()


@pytest.fixture(scope="session")
def settings_factory() -> UserSettingsFactory:
    return UserSettingsFactory()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()
