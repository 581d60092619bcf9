"""Tree builder: flat ParsedLine sequence to a forest of ChecklistNode.

Nesting is recovered from indentation with an explicit ancestor stack.
An item becomes a child of the nearest preceding item whose level is
strictly smaller, so depth jumps of several levels are accepted rather
than rejected.

Example:
    >>> from casillas.lines import parse_lines
    >>> forest = build_tree(parse_lines("- [ ] a\\n  - [ ] b\\n- [ ] c"))
    >>> [(n.text, [c.text for c in n.children]) for n in forest]
    [('a', ['b']), ('c', [])]

Complexity: O(n) in the number of parsed lines.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from casillas.config import DEFAULT_INDENT_SIZE, check_indent_size
from casillas.lines import ParsedLine, TaskState
from casillas.location import SourceLocation

ROOT_LEVEL = -1


@dataclass(slots=True)
class ChecklistNode:
    """A checklist item with its nested items.

    Mutable only while the builder appends children; treat as read-only
    once ``build_tree`` returns.

    """

    level: int
    state: TaskState
    text: str
    children: list[ChecklistNode] = field(default_factory=list)
    location: SourceLocation = field(default_factory=SourceLocation.unknown)

    def walk(self) -> Iterator[ChecklistNode]:
        """Yield this node and all descendants, depth-first in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


def build_tree(
    lines: Iterable[ParsedLine],
    indent_size: int = DEFAULT_INDENT_SIZE,
) -> list[ChecklistNode]:
    """Reconstruct nesting from indentation.

    Args:
        lines: Parsed checklist lines in document order
        indent_size: Spaces per nesting level (same value used for parsing)

    Returns:
        Top-level nodes in document order

    Raises:
        ConfigError: If indent_size is not a positive integer.
    """
    check_indent_size(indent_size)

    # Synthetic anchor, never serialized
    root = ChecklistNode(level=ROOT_LEVEL, state=TaskState.TODO, text="")
    stack: list[ChecklistNode] = [root]

    for line in lines:
        level = line.indent // indent_size
        node = ChecklistNode(
            level=level,
            state=line.state,
            text=line.text,
            location=line.location,
        )

        while stack[-1].level >= level:
            stack.pop()

        stack[-1].children.append(node)
        stack.append(node)

    return root.children


__all__ = [
    "ChecklistNode",
    "build_tree",
]
