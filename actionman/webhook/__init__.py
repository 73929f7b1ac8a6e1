"""Webhook decoding (events) and event dispatch (handlers)."""

from actionman.webhook.events import (
    IssueCommentEvent,
    UnsupportedEvent,
    WebhookEvent,
    WebhookParseError,
    parse_webhook,
)

__all__ = [
    "IssueCommentEvent",
    "UnsupportedEvent",
    "WebhookEvent",
    "WebhookParseError",
    "parse_webhook",
]
