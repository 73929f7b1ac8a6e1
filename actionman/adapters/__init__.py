"""Git platform adapters (base and implementations)."""

from actionman.adapters.base import GitPlatformAdapter, GitPlatformError
from actionman.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
