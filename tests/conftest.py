import os
import pytest

SETTINGS_ENV_PREFIXES = ("COPILOT_", "APP_")


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """
    Keeps settings at their defaults for every test, whatever is exported in
    the developer's shell or CI environment.
    """
    for key in list(os.environ):
        if key.startswith(SETTINGS_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)
    yield
