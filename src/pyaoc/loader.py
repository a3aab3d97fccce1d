"""Reading formal contexts from text files.

The text format lists objects as attribute sets in braces, separated by
``;``, with attributes inside a set also separated by ``;``::

    {A;B;C};{A;C};{A;B;D}

describes three objects with attribute sets ABC, AC and ABD. A file may
spread the sets over several lines. Blank lines and ``#`` comments are
ignored. ``{}`` is an object without attributes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pyaoc.context import LABEL_RE, FormalContext
from pyaoc.errors import MalformedRowError

logger = logging.getLogger(__name__)

_SET_SEPARATOR = "};{"


def parse_row(text: str, line_no: int | None = None) -> frozenset[str]:
    """Parse the inside of one brace group, ``A;B;C``, into an attribute set."""
    where = f"line {line_no}: " if line_no is not None else ""
    if "{" in text or "}" in text:
        raise MalformedRowError(f"{where}unbalanced braces in {text!r}")
    labels = set()
    for raw in text.split(";"):
        label = raw.strip()
        if not label:
            continue
        if not LABEL_RE.match(label):
            raise MalformedRowError(
                f"{where}attribute set {{{text}}} contains {label!r}: "
                f"only letters, digits and spaces are allowed."
            )
        labels.add(label)
    return frozenset(labels)


def parse_line(line: str, line_no: int | None = None) -> list[frozenset[str]]:
    """Parse one line of brace groups into attribute sets."""
    line = line.strip()
    where = f"line {line_no}: " if line_no is not None else ""
    if not (line.startswith("{") and line.endswith("}")):
        raise MalformedRowError(f"{where}expected attribute sets in braces, got {line!r}")
    body = line[1:-1]
    return [parse_row(group, line_no) for group in body.split(_SET_SEPARATOR)]


def parse_rows(text: str) -> list[frozenset[str]]:
    """Parse a whole document into attribute sets, in order of appearance.

    Duplicate sets are kept: each one is a distinct object.
    """
    rows: list[frozenset[str]] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        rows.extend(parse_line(stripped, line_no))
    logger.debug("Parsed %d attribute sets", len(rows))
    return rows


def dump_rows(context: FormalContext) -> str:
    """Render *context* in the brace format."""
    return ";".join("{" + ";".join(sorted(attrs)) + "}" for attrs in context.objects)


def load_context(path: str | Path) -> FormalContext:
    """Load a context from *path*.

    ``.json`` files are read with ``FormalContext.from_file``; any other file
    is parsed as brace-format text.
    """
    path = Path(path)
    if path.suffix.lower() == ".json":
        return FormalContext.from_file(path)
    with open(path) as f:
        rows = parse_rows(f.read())
    context = FormalContext(rows)
    logger.debug("Loaded context from %s", path)
    return context
