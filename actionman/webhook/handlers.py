"""Handle a decoded GitHub webhook event.

Only issue_comment events are acted on; everything else is logged and
ignored. Errors are logged here and never reach the caller.
"""

import logging

from actionman.adapters.base import GitPlatformAdapter
from actionman.commands import CommandError, handle_comment
from actionman.webhook.events import IssueCommentEvent, UnsupportedEvent


def handle_github_event(
    adapter: GitPlatformAdapter,
    event_name: str,
    event: IssueCommentEvent | UnsupportedEvent | None,
    log: logging.Logger | None = None,
) -> None:
    """Dispatch a webhook event by variant.

    event is None when the payload could not be decoded; the failure has
    already been reported by the caller.
    """
    logger = log or logging.getLogger("actionman.webhook.handlers")

    if event is None:
        if event_name != "issue_comment":
            logger.info("unhandled event, ignoring (event=%s)", event_name)
        else:
            logger.debug("No decoded payload for %s event, nothing to do", event_name)
        return

    if isinstance(event, IssueCommentEvent):
        logger.info("Handling issue comment event")
        try:
            handle_comment(adapter, event, log=logger)
        except CommandError as e:
            logger.error("Handling comment: %s", e)
        return

    if isinstance(event, UnsupportedEvent):
        logger.info("unhandled event, ignoring (event=%s)", event.name)
        return

    raise TypeError(f"unknown webhook event variant: {type(event).__name__}")
