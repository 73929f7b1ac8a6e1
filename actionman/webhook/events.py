"""Event schemas for GitHub webhook payloads.

A payload decodes to one variant of WebhookEvent, keyed by ``kind``:

- issue_comment: comment created/edited/deleted on an issue or pull request
- unsupported: any other event name; only the name is kept
"""

import json
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError


class WebhookParseError(Exception):
    """Raised when a webhook payload cannot be decoded for its event name."""

    pass


class IssueCommentEvent(BaseModel):
    """Comment on an issue or PR (issue_comment webhook)."""

    kind: Literal["issue_comment"] = "issue_comment"
    action: str = ""
    owner: str = Field(description="Repository owner login")
    repo: str = Field(description="Repository name without owner")
    issue_number: int
    is_pull_request: bool = Field(default=False, description="Parent issue is a pull request")
    comment_body: str = ""
    comment_author: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class UnsupportedEvent(BaseModel):
    """Event type this bot does not react to."""

    kind: Literal["unsupported"] = "unsupported"
    name: str


WebhookEvent = Annotated[Union[IssueCommentEvent, UnsupportedEvent], Field(discriminator="kind")]

_event_adapter: TypeAdapter[Any] = TypeAdapter(WebhookEvent)


def _issue_comment_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten the nested GitHub issue_comment payload."""
    repo_payload = payload.get("repository") or {}
    owner_payload = repo_payload.get("owner") or {}
    issue_payload = payload.get("issue") or {}
    comment_payload = payload.get("comment")
    if not isinstance(comment_payload, dict):
        raise WebhookParseError("issue_comment payload missing 'comment'")
    user = comment_payload.get("user") or {}
    return {
        "kind": "issue_comment",
        "action": payload.get("action") or "",
        "owner": owner_payload.get("login"),
        "repo": repo_payload.get("name"),
        "issue_number": issue_payload.get("number"),
        # GitHub marks PR conversations with a pull_request key on the issue
        "is_pull_request": issue_payload.get("pull_request") is not None,
        "comment_body": comment_payload.get("body") or "",
        "comment_author": user.get("login", ""),
    }


def parse_webhook(event_name: str, data: bytes | str) -> IssueCommentEvent | UnsupportedEvent:
    """Decode a raw webhook payload for the given event name.

    Raises WebhookParseError on invalid JSON, a non-object payload or an
    issue_comment payload without the fields needed to reply.
    """
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise WebhookParseError(f"invalid JSON for {event_name} event: {e}") from e
    if not isinstance(payload, dict):
        raise WebhookParseError(f"{event_name} payload is not a JSON object")

    if event_name == "issue_comment":
        raw: Dict[str, Any] = _issue_comment_fields(payload)
    else:
        raw = {"kind": "unsupported", "name": event_name}
    try:
        return _event_adapter.validate_python(raw)
    except ValidationError as e:
        raise WebhookParseError(f"invalid {event_name} payload: {e}") from e
