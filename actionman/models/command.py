"""Slash command line taken from a comment body."""

from typing import List

from pydantic import BaseModel, Field


class CommandLine(BaseModel):
    """First line of a comment body split into tokens.

    Tokens are separated by a single space, so repeated spaces yield empty
    tokens. No quoting or escaping.
    """

    tokens: List[str] = Field(default_factory=list)

    @classmethod
    def from_body(cls, body: str) -> "CommandLine":
        first_line = body.split("\n")[0]
        return cls(tokens=first_line.split(" "))

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""

    @property
    def args(self) -> List[str]:
        return self.tokens[1:]
