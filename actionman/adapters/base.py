"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod

from actionman.models import Comment


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Abstract interface for the hosting platform API used to reply."""

    @abstractmethod
    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue or pull request."""
        ...
