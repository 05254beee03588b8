"""Human-readable diagnostics for rule failures."""
from typing import Dict, Optional

from rich.console import Console
from rich.text import Text

from .models import ErrorType, GroupError, SingleError

ERROR_MESSAGES: Dict[ErrorType, str] = {
    ErrorType.HEADER_EMPTY: "header is empty",
    ErrorType.BODY_EMPTY: "body is empty",
    ErrorType.BLANK_LINE_SEPARATION: "there is not exactly one empty line before body",
    ErrorType.HEADER_TOO_LONG: "header is too long",
    ErrorType.BODY_LINE_TOO_LONG: "body line is too long",
}


def describe(error_type: ErrorType) -> str:
    return ERROR_MESSAGES[error_type]


def _decoded_width(data: bytes) -> int:
    # A span may start or end inside a multi-byte character
    return len(data.decode("utf-8", errors="ignore"))


def render_error(source: str, error: SingleError) -> Text:
    """Render one error as a numbered source line with a caret underline.

    Spans crossing a line break are underlined up to the end of the line
    they start on.
    """
    data = source.encode("utf-8")
    line_start = data.rfind(b"\n", 0, error.offset) + 1
    line_end = data.find(b"\n", error.offset)
    if line_end == -1:
        line_end = len(data)
    line_number = data.count(b"\n", 0, line_start) + 1

    line = data[line_start:line_end].decode("utf-8", errors="replace").rstrip("\r")
    column = _decoded_width(data[line_start:error.offset])
    width = max(1, _decoded_width(data[error.offset:min(error.end, line_end)]))

    gutter = f"{line_number:>4} │ "
    text = Text()
    text.append(gutter, style="dim")
    text.append(line)
    text.append("\n")
    text.append(" " * (len(gutter) + column))
    text.append("^" * width, style="bold red")
    text.append(f" {describe(error.error_type)}", style="red")
    return text


def render_group_error(group: GroupError, console: Optional[Console] = None) -> None:
    """Print every error of a group, in the order the rules ran."""
    console = console or Console(stderr=True)
    console.print(Text(f"✗ {group}", style="bold red"))
    for error in group.errors:
        console.print()
        console.print(render_error(group.source, error))
