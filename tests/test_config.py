"""Tests for configuration loading (env, YAML, CLI overrides)."""

from pathlib import Path

import pytest

from actionman.config import AppConfig, load_config


def _set_action_env(monkeypatch: pytest.MonkeyPatch, event_path: Path) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo-org/infra")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_path))
    monkeypatch.setenv("GITHUB_EVENT_NAME", "issue_comment")
    monkeypatch.setenv("ACTIONMAN_GITHUB_TOKEN", "env-token")


def test_defaults_without_env() -> None:
    """With nothing set, optional settings have defaults and required are missing."""
    config = load_config()
    assert config.github.api_url == "https://api.github.com"
    assert config.action.debug is False
    assert config.logging.level == "INFO"
    assert config.missing_required() == [
        "--github-repository",
        "--github-event-path",
        "--github-event-name",
        "--github-token",
    ]


def test_reads_github_actions_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Runner environment variables fill the required settings."""
    _set_action_env(monkeypatch, tmp_path / "event.json")
    monkeypatch.setenv("ACTIONMAN_DEBUG", "true")
    config = load_config()
    assert config.github.repository == "octo-org/infra"
    assert config.github.event_path == tmp_path / "event.json"
    assert config.github.event_name == "issue_comment"
    assert config.github_token_resolved == "env-token"
    assert config.action.debug is True
    assert config.missing_required() == []


def test_cli_overrides_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Non-None overrides win over the environment; None values are skipped."""
    _set_action_env(monkeypatch, tmp_path / "event.json")
    config = load_config(
        overrides={
            "github": {"event_name": "push", "repository": None},
            "action": {"github_token": "cli-token", "debug": None},
        }
    )
    assert config.github.event_name == "push"
    assert config.github.repository == "octo-org/infra"
    assert config.github_token_resolved == "cli-token"
    assert config.action.debug is False


def test_yaml_file_with_env_substitution(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """YAML values are loaded and ${VAR} is taken from the environment."""
    monkeypatch.setenv("MY_TOKEN", "yaml-token")
    config_file = tmp_path / "actionman.yaml"
    config_file.write_text(
        "github:\n"
        "  api_url: https://github.example.com/api/v3\n"
        "action:\n"
        "  github_token: ${MY_TOKEN}\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(config_file)
    assert config.github.api_url == "https://github.example.com/api/v3"
    assert config.github_token_resolved == "yaml-token"
    assert config.logging.level == "DEBUG"


def test_missing_yaml_file_is_ignored(tmp_path: Path) -> None:
    """A config path that does not exist falls back to env and defaults."""
    config = load_config(tmp_path / "nope.yaml")
    assert isinstance(config, AppConfig)
    assert config.github.api_url == "https://api.github.com"


def test_unresolved_placeholder_falls_back_to_token_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """An unsubstituted ${VAR} token is ignored in favour of the secret file."""
    secret = tmp_path / "token"
    secret.write_text("file-token\n")
    monkeypatch.setenv("ACTIONMAN_GITHUB_TOKEN_FILE", str(secret))
    config = load_config(overrides={"action": {"github_token": "${UNSET_TOKEN}"}})
    assert config.github_token_resolved == "file-token"


def test_missing_required_reports_only_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """missing_required lists just the settings that are still empty."""
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo-org/infra")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "push")
    config = load_config()
    assert config.missing_required() == ["--github-event-path", "--github-token"]
