"""actionman entry point.

Runs once per GitHub Actions event: reads the event payload named by
GITHUB_EVENT_PATH, replies to slash commands in issue comments and exits.
Usage: actionman [--config actionman.yaml] [--debug] [--check]
"""

import argparse
import logging
import sys
from pathlib import Path

from actionman.adapters.github import GitHubAdapter
from actionman.config import AppConfig, load_config
from actionman.logging import ActionmanLogging
from actionman.webhook.events import WebhookParseError, parse_webhook
from actionman.webhook.handlers import handle_github_event


def build_parser() -> argparse.ArgumentParser:
    """CLI flags; each one overrides its environment variable when given."""
    parser = argparse.ArgumentParser(
        prog="actionman",
        description="Reply to /ping and /kubectl comments on GitHub issues and pull requests",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Optional YAML config file",
    )
    parser.add_argument(
        "--github-repository",
        help="Name of the repository to act on (env: GITHUB_REPOSITORY)",
    )
    parser.add_argument(
        "--github-event-path",
        type=Path,
        help="Path to event.json (env: GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--github-event-name",
        help="Name of the event that triggered this run (env: GITHUB_EVENT_NAME)",
    )
    parser.add_argument(
        "--github-token",
        help="Token to access the GitHub API with (env: ACTIONMAN_GITHUB_TOKEN)",
    )
    parser.add_argument(
        "--github-api-url",
        help="GitHub API base URL (env: GITHUB_API_URL)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Output debug logs (env: ACTIONMAN_DEBUG)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, dict[str, object]]:
    return {
        "github": {
            "repository": args.github_repository,
            "event_path": args.github_event_path,
            "event_name": args.github_event_name,
            "api_url": args.github_api_url,
        },
        "action": {
            "github_token": args.github_token,
            "debug": args.debug,
        },
    }


def run(config: AppConfig) -> int:
    """Handle the configured event once. Returns the process exit code."""
    log = logging.getLogger("actionman")
    event_path = config.github.event_path
    event_name = config.github.event_name or ""

    try:
        data = Path(event_path).read_bytes()
    except OSError as e:
        log.error("error reading %s: %s", event_path, e)
        return 1

    try:
        event = parse_webhook(event_name, data)
    except WebhookParseError as e:
        log.error("Parsing webhook failed: %s", e)
        event = None

    adapter = GitHubAdapter(
        token=config.github_token_resolved or "",
        api_url=config.github.api_url,
    )
    handle_github_event(adapter, event_name, event, log=logging.getLogger("actionman.webhook"))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, set up logging, handle the event."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, _overrides(args))
    try:
        missing = config.missing_required()
    except OSError as e:
        parser.error(f"cannot read token file: {e}")
    if missing:
        parser.error("missing required settings: " + ", ".join(missing))

    if args.check:
        print("Config OK:", config.github.repository, config.github.event_name)
        return 0

    ActionmanLogging(config.logging, debug=config.action.debug).setup()
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
