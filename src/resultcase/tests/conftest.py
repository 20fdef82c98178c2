"""Shared fixtures for resultcase tests."""

import pytest

from resultcase.foundation.config import clear_settings_cache
from resultcase.runtime.observability import configure_logging, reset_logging


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate every test from RESULTCASE_* variables, cached settings and log output."""
    import os

    for key in [k for k in os.environ if k.startswith("RESULTCASE_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))
    clear_settings_cache()
    configure_logging(format="none", level="INFO")
    yield
    clear_settings_cache()
    reset_logging()
