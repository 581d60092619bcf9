"""Line parser: raw checklist text to a flat sequence of ParsedLine.

Recognizes exactly one line shape::

    <indent><marker> [<mark>] <text>

where ``marker`` is ``-`` or ``*`` and the checkbox is ``[ ]``, ``[]``,
``[x]`` or ``[X]``. Every other line (prose, headings, plain bullets) is
skipped without error and does not take part in nesting.

Example:
    >>> [p.text for p in parse_lines("# Plan\\n- [ ] a\\n  - [x] b")]
    ['a', 'b']

Thread Safety:
    All functions are pure. The compiled pattern is immutable.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from casillas.config import DEFAULT_INDENT_SIZE, check_indent_size
from casillas.location import SourceLocation
from casillas.utils.logger import get_logger

logger = get_logger(__name__)

# indent, bullet marker, checkbox mark (absent for "[]"), label.
# The label never spans CR or the Unicode line/paragraph separators.
_CHECKLIST_PATTERN = re.compile(r"^(\s*)([-*])\s+\[([ xX])?\]\s*([^\r\n\u2028\u2029]*)$")


class TaskState(StrEnum):
    """Completion state of a checklist item, spelled as ADF expects."""

    TODO = "TODO"
    DONE = "DONE"


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """A single matching checklist line.

    Attributes:
        indent: Leading whitespace width after tab expansion
        state: TODO or DONE
        text: Trimmed label, may be empty
        location: Line number in the input and column of the bullet marker

    """

    indent: int
    state: TaskState
    text: str
    location: SourceLocation


def normalize_source(source: str, indent_size: int = DEFAULT_INDENT_SIZE) -> list[str]:
    """Split source into lines with CRLF folded and tabs expanded.

    Tabs are replaced by ``indent_size`` spaces everywhere on the line, so
    indentation width is comparable regardless of tab/space mixing.
    Blank lines are kept so that line numbers stay aligned with the input.

    Raises:
        ConfigError: If indent_size is not a positive integer.
    """
    check_indent_size(indent_size)
    text = str(source).replace("\r\n", "\n")
    expanded = text.replace("\t", " " * indent_size)
    return expanded.split("\n")


def parse_line(
    line: str,
    lineno: int = 1,
    source_file: str | None = None,
) -> ParsedLine | None:
    """Parse one normalized line, or return None if it is not a checklist item.

    Args:
        line: A single line with tabs already expanded
        lineno: 1-indexed line number, recorded in the location
        source_file: Optional source file path, recorded in the location

    Returns:
        ParsedLine, or None for any non-matching line

    Example:
        >>> parse_line("  * [X] Ship it").state
        <TaskState.DONE: 'DONE'>
        >>> parse_line("- [y] nope") is None
        True
    """
    m = _CHECKLIST_PATTERN.match(line)
    if m is None:
        return None

    indent = len(m.group(1))
    mark = m.group(3)
    state = TaskState.DONE if mark in ("x", "X") else TaskState.TODO
    return ParsedLine(
        indent=indent,
        state=state,
        text=m.group(4).strip(),
        location=SourceLocation(lineno=lineno, col_offset=indent + 1, source_file=source_file),
    )


def parse_lines(
    source: str,
    indent_size: int = DEFAULT_INDENT_SIZE,
    *,
    source_file: str | None = None,
) -> list[ParsedLine]:
    """Parse every checklist line of source, in document order.

    Blank lines and non-matching lines are dropped. Never raises for
    string input; the worst case is an empty list.

    Raises:
        ConfigError: If indent_size is not a positive integer.
    """
    items: list[ParsedLine] = []
    skipped = 0
    for lineno, line in enumerate(normalize_source(source, indent_size), start=1):
        if not line.strip():
            continue
        parsed = parse_line(line, lineno, source_file)
        if parsed is None:
            skipped += 1
            continue
        logger.debug("%s: %s item at indent %d", parsed.location, parsed.state, parsed.indent)
        items.append(parsed)

    logger.debug("Matched %d checklist lines, skipped %d other lines", len(items), skipped)
    return items


__all__ = [
    "ParsedLine",
    "TaskState",
    "normalize_source",
    "parse_line",
    "parse_lines",
]
