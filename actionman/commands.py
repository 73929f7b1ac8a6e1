"""Slash commands in issue and pull request comments.

Recognized commands (case-sensitive, at the start of the comment body):

- /ping: reply PONG on any issue or PR
- /kubectl <command> <cluster>: on pull requests only; ``plan`` replies with
  placeholder output, any other command with an error message
"""

import logging

from actionman.adapters.base import GitPlatformAdapter, GitPlatformError
from actionman.models import CommandLine, Comment
from actionman.webhook.events import IssueCommentEvent

PING_PREFIX = "/ping"
KUBECTL_PREFIX = "/kubectl"

PONG = "PONG"
KUBECTL_USAGE = "usage: /kubectl <command> <cluster>"
PLAN_OUTPUT = "PLAN OUTPUT GOES HERE"
INVALID_KUBECTL_COMMAND = "invalid command {}, must be plan or apply"

_LOG = logging.getLogger("actionman.commands")


class CommandError(Exception):
    """Raised when handling a comment command fails."""

    pass


class ConsistencyError(CommandError):
    """Dispatcher and command handler disagree on the trigger prefix."""

    pass


def write_comment(
    adapter: GitPlatformAdapter,
    event: IssueCommentEvent,
    template: str,
    *args: object,
    log: logging.Logger | None = None,
) -> Comment:
    """Format template with args and post it as a reply on the event's issue."""
    logger = log or _LOG
    body = template.format(*args) if args else template
    logger.debug("Posting reply on %s#%s: %s", event.full_name, event.issue_number, body)
    try:
        return adapter.create_comment(event.owner, event.repo, event.issue_number, body)
    except GitPlatformError as e:
        raise CommandError(f"posting reply comment: {e}") from e


def handle_kubectl(
    adapter: GitPlatformAdapter,
    event: IssueCommentEvent,
    log: logging.Logger | None = None,
) -> None:
    """Parse the /kubectl command line and reply to it.

    Only ``/kubectl <command> <cluster>`` is well formed; anything else gets the
    usage message. The cluster is accepted but not used yet.
    """
    logger = log or _LOG
    line = CommandLine.from_body(event.comment_body)
    if line.name != KUBECTL_PREFIX:
        raise ConsistencyError(f"consistency error - expected first arg {KUBECTL_PREFIX}, got {line.name}")
    if len(line.tokens) != 3:
        write_comment(adapter, event, KUBECTL_USAGE, log=logger)
        return
    command, cluster = line.args
    logger.debug("kubectl command=%s cluster=%s", command, cluster)
    if command == "plan":
        write_comment(adapter, event, PLAN_OUTPUT, log=logger)
    else:
        write_comment(adapter, event, INVALID_KUBECTL_COMMAND, command, log=logger)


def handle_comment(
    adapter: GitPlatformAdapter,
    event: IssueCommentEvent,
    log: logging.Logger | None = None,
) -> None:
    """Reply to a recognized command in a new comment; ignore anything else."""
    logger = log or _LOG
    body = event.comment_body
    if body.startswith(PING_PREFIX):
        logger.info("Responding to /ping comment on issue %s", event.issue_number)
        write_comment(adapter, event, PONG, log=logger)
    if body.startswith(KUBECTL_PREFIX):
        if not event.is_pull_request:
            logger.debug("Ignoring /kubectl on issue %s: not a pull request", event.issue_number)
            return
        logger.info("Responding to /kubectl comment on PR %s", event.issue_number)
        try:
            handle_kubectl(adapter, event, log=logger)
        except CommandError as e:
            raise CommandError(f"handling /kubectl: {e}") from e
