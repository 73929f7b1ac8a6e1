"""Configuration loading from environment, optional YAML and CLI flags.

Inputs follow the GitHub Actions runner environment (GITHUB_REPOSITORY,
GITHUB_EVENT_PATH, GITHUB_EVENT_NAME). The token is read from
ACTIONMAN_GITHUB_TOKEN or from a file whose path is in
ACTIONMAN_GITHUB_TOKEN_FILE (Docker secrets). Never put real tokens in config
files committed to the repo.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _read_secret(env: Mapping[str, str], env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = env.get(env_key)
    if value:
        return value.strip()
    file_path = env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


class GitHubConfig(BaseSettings):
    """Repository, event and API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    repository: str | None = Field(default=None, description="Repository to act on (owner/name)")
    event_path: Path | None = Field(default=None, description="Path to event.json")
    event_name: str | None = Field(default=None, description="Name of the event that triggered this run")
    api_url: str = Field(default="https://api.github.com", description="API base URL")


class ActionConfig(BaseSettings):
    """Credentials and switches specific to actionman."""

    model_config = SettingsConfigDict(env_prefix="ACTIONMAN_", extra="ignore")

    # The git credential helper reads ACTIONMAN_GITHUB_TOKEN directly as well
    github_token: str | None = Field(default=None, description="Token to access the GitHub API with")
    debug: bool = Field(default=False, description="Output debug logs")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from env + YAML + CLI."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    action: ActionConfig = Field(default_factory=ActionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config or Docker secret file."""
        t = self.action.github_token
        if t and not t.startswith("${"):
            return t
        return _read_secret(os.environ, "ACTIONMAN_GITHUB_TOKEN", "ACTIONMAN_GITHUB_TOKEN_FILE")

    def missing_required(self) -> list[str]:
        """Return CLI flag names of required settings that are not set."""
        missing = []
        if not self.github.repository:
            missing.append("--github-repository")
        if not self.github.event_path:
            missing.append("--github-event-path")
        if not self.github.event_name:
            missing.append("--github-event-name")
        if not self.github_token_resolved:
            missing.append("--github-token")
        return missing


def _substitute_env(value: Any, env: Mapping[str, str]) -> Any:
    """Replace ${VAR} and $VAR in strings with values from env."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(
    config_path: Path | None = None,
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
) -> AppConfig:
    """Load config from environment, optional YAML file and CLI overrides.

    overrides maps section name (github, action, logging) to field values;
    None values are skipped so unset CLI flags do not mask the environment.
    """
    raw: dict[str, Any] = {}
    if config_path is not None and config_path.is_file():
        raw = yaml.safe_load(config_path.read_text()) or {}
        raw = _substitute_env(raw, os.environ)

    sections: dict[str, dict[str, Any]] = {
        name: dict(raw.get(name) or {}) for name in ("github", "action", "logging")
    }
    for name, values in (overrides or {}).items():
        sections.setdefault(name, {}).update({k: v for k, v in values.items() if v is not None})

    return AppConfig(
        github=GitHubConfig(**sections["github"]),
        action=ActionConfig(**sections["action"]),
        logging=LoggingConfig(**sections["logging"]),
    )
