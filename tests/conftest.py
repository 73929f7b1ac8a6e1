"""Shared fixtures."""

import pytest

_ENV_KEYS = (
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_PATH",
    "GITHUB_EVENT_NAME",
    "GITHUB_API_URL",
    "ACTIONMAN_GITHUB_TOKEN",
    "ACTIONMAN_GITHUB_TOKEN_FILE",
    "ACTIONMAN_DEBUG",
    "LOGGING_LEVEL",
    "LOGGING_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests may run inside GitHub Actions, where these are already set."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
