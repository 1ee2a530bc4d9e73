"""Text wrapping and status colouring for the terminal tables."""

from __future__ import annotations

from rich.text import Text

from epicboard.core.models import Status

STATUS_STYLES = {
    Status.OPEN: "",
    Status.IN_PROGRESS: "yellow",
    Status.RESOLVED: "blue",
    Status.CLOSED: "green",
}


def constrain_text(text: str, line_limit: int) -> str:
    """
    Break a single-line string into lines of roughly ``line_limit`` characters,
    only ever breaking before a word.

    >>> constrain_text("This will be very interesting", 10)
    'This will\\nbe very\\ninteresting'
    """
    out: list[str] = []
    line_count = 0
    for word in text.strip().split(" "):
        if line_count >= line_limit or line_count + len(word) >= line_limit:
            out.append("\n" + word)
            line_count = len(word) + 1
        else:
            out.append(" " + word)
            line_count += len(word) + 1
    return "".join(out).strip()


def status_text(status: Status) -> Text:
    """The status label, coloured by status."""
    return Text(status.label, style=STATUS_STYLES[status])
