"""actionman: reply to slash commands in GitHub issue and pull request comments."""

__version__ = "0.1.0"
