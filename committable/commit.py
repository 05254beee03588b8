"""Read-only view over a commit message."""
from typing import Optional


def byte_len(text: str) -> int:
    """Length of text in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def _starts_with_blank_line(text: str) -> bool:
    return text.startswith("\n") or text.startswith("\r\n")


class Commit:
    """A commit message split into header and body.

    The text is held as given and never modified. Everything else is
    derived on demand, and every offset is a byte position in the
    original text so that spans can be rendered against it.
    """

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def header(self) -> str:
        """First line of the message without its line terminator."""
        header, sep, _ = self._text.partition("\n")
        # A lone trailing "\r" without "\n" is part of the line
        if sep and header.endswith("\r"):
            header = header[:-1]
        return header

    def remainder(self) -> Optional[str]:
        """Everything after the header's newline, None if there is none."""
        _, sep, rest = self._text.partition("\n")
        if not sep:
            return None
        return rest

    def body(self) -> Optional[str]:
        """Content after the header and any blank lines following it."""
        body = self.remainder()
        if body is None:
            return None

        while _starts_with_blank_line(body):
            body = body.partition("\n")[2]

        return body or None

    def offset_of(self, suffix: str) -> int:
        """Byte offset at which a suffix of the text starts."""
        return byte_len(self._text) - byte_len(suffix)

    def remainder_offset(self) -> Optional[int]:
        rest = self.remainder()
        if rest is None:
            return None
        return self.offset_of(rest)

    def body_offset(self) -> Optional[int]:
        body = self.body()
        if body is None:
            return None
        return self.offset_of(body)

    def __repr__(self) -> str:
        return f"Commit({self._text!r})"
