"""Data models for comments and command lines (Pydantic)."""

from actionman.models.command import CommandLine
from actionman.models.comment import Comment

__all__ = ["CommandLine", "Comment"]
