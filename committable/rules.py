"""Structural rules for commit messages."""
from abc import ABC, abstractmethod
from typing import Optional

from .commit import Commit, byte_len
from .models import ErrorType, SingleError

HEADER_MAX_LENGTH = 50
BODY_LINE_MAX_LENGTH = 72


class Rule(ABC):
    """Abstract base class for commit message rules.

    A rule only reads the commit. It returns None when the message
    satisfies it, otherwise exactly one located error.
    """

    error_type: ErrorType

    @property
    def name(self) -> str:
        return type(self).__name__

    def fail(self, offset: int, length: int) -> SingleError:
        return SingleError(error_type=self.error_type, offset=offset, length=length)

    @abstractmethod
    def check(self, commit: Commit) -> Optional[SingleError]:
        """Check the commit message."""
        pass


class NonEmptyHeader(Rule):
    """The header must contain something other than whitespace."""

    error_type = ErrorType.HEADER_EMPTY

    def check(self, commit: Commit) -> Optional[SingleError]:
        header = commit.header()
        if not header.strip():
            # Highlight the untrimmed header so whitespace shows up
            return self.fail(0, byte_len(header))
        return None


class NonEmptyBody(Rule):
    """Text after the header must not be blank lines only."""

    error_type = ErrorType.BODY_EMPTY

    def check(self, commit: Commit) -> Optional[SingleError]:
        rest = commit.remainder()
        if rest and commit.body() is None:
            return self.fail(commit.offset_of(rest), byte_len(rest))
        return None


class SingleEmptyLineBeforeBody(Rule):
    """Header and body are separated by exactly one blank line."""

    error_type = ErrorType.BLANK_LINE_SEPARATION

    def check(self, commit: Commit) -> Optional[SingleError]:
        rest = commit.remainder()
        if not rest:
            return None
        start = commit.offset_of(rest)

        if not (rest.startswith("\n") or rest.startswith("\r\n")):
            first_line = rest.split("\n", 1)[0]
            return self.fail(start, byte_len(first_line))

        first_line, _, tail = rest.partition("\n")
        if not (tail.startswith("\n") or tail.startswith("\r\n")):
            return None

        run = len(tail) - len(tail.lstrip("\r\n"))
        if run == len(tail):
            # Only trailing blank lines, nothing to separate
            return None
        return self.fail(start + byte_len(first_line), run)


class HeaderLength(Rule):
    """The header is at most HEADER_MAX_LENGTH bytes."""

    error_type = ErrorType.HEADER_TOO_LONG

    def __init__(self, max_length: int = HEADER_MAX_LENGTH):
        self.max_length = max_length

    def check(self, commit: Commit) -> Optional[SingleError]:
        length = byte_len(commit.header())
        if length > self.max_length:
            return self.fail(self.max_length, length - self.max_length)
        return None


class BodyLength(Rule):
    """Every body line is at most BODY_LINE_MAX_LENGTH bytes.

    Only the first offending line is reported.
    """

    error_type = ErrorType.BODY_LINE_TOO_LONG

    def __init__(self, max_length: int = BODY_LINE_MAX_LENGTH):
        self.max_length = max_length

    def check(self, commit: Commit) -> Optional[SingleError]:
        body = commit.body()
        if body is None:
            return None

        offset = commit.offset_of(body)
        for line in body.split("\n"):
            length = byte_len(line)
            if length > self.max_length:
                return self.fail(offset + self.max_length, length - self.max_length)
            offset += length + 1
        return None
