"""
Casillas: GFM checklists to Atlassian Document Format task lists

Turns GitHub-Flavored-Markdown checklists into the nested ``taskList`` /
``taskItem`` structure an issue tracker accepts as a rich-text field.
Pure, synchronous and dependency-free.

Quick Start:
    >>> from casillas import to_adf
    >>> adf = to_adf("- [ ] Buy milk\\n- [x] Walk dog")
    >>> [item["attrs"]["state"] for item in adf["content"][0]["content"]]
    ['TODO', 'DONE']

    >>> # Typed nodes instead of dicts
    >>> from casillas import convert, CounterIdGenerator
    >>> doc = convert("- [ ] Parent\\n  - [ ] Child", id_generator=CounterIdGenerator())
    >>> doc.task_list.local_id
    'id-1'

Pipeline:
    parse_lines()  text -> [ParsedLine]        (casillas.lines)
    build_tree()   [ParsedLine] -> forest      (casillas.tree)
    serialize()    forest -> Document          (casillas.serializer)
    to_dict()      Document -> ADF dict        (casillas.serialization)

Installation:
    pip install casillas
"""

from collections.abc import Iterable
from typing import Any

from casillas.config import (
    DEFAULT_INDENT_SIZE,
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from casillas.errors import CasillasError, ConfigError, SerializationError
from casillas.ids import CounterIdGenerator, IdGenerator, default_id_generator
from casillas.lines import ParsedLine, TaskState, normalize_source, parse_line, parse_lines
from casillas.location import SourceLocation
from casillas.nodes import Block, Document, Node, TaskItem, TaskList, Text
from casillas.serialization import from_dict, from_json, to_dict, to_json
from casillas.serializer import serialize, serialize_task_list
from casillas.tree import ChecklistNode, build_tree
from casillas.utils.logger import get_logger
from casillas.visitor import BaseVisitor, collect_local_ids, count_items, transform

__version__ = "0.1.0"

logger = get_logger(__name__)


def _resolve_config(
    indent_size: int | None,
    id_generator: IdGenerator | None,
) -> ConvertConfig:
    """Overlay explicit options on the ambient config."""
    ambient = get_convert_config()
    if indent_size is None and id_generator is None:
        return ambient
    return ConvertConfig(
        indent_size=ambient.indent_size if indent_size is None else indent_size,
        id_generator=ambient.id_generator if id_generator is None else id_generator,
    )


def _convert(source: str, config: ConvertConfig, source_file: str | None = None) -> Document:
    lines = parse_lines(source, config.indent_size, source_file=source_file)
    forest = build_tree(lines, config.indent_size)
    doc = serialize(forest, config.id_generator)
    logger.debug(
        "Converted %d checklist lines into %d top-level items (indent_size=%d)",
        len(lines),
        len(forest),
        config.indent_size,
    )
    return doc


def convert(
    source: str,
    *,
    indent_size: int | None = None,
    id_generator: IdGenerator | None = None,
    source_file: str | None = None,
) -> Document:
    """Convert GFM checklist text into a typed ADF Document.

    Args:
        source: Checklist Markdown. Lines that are not checklist items are
            ignored.
        indent_size: Spaces per nesting level (ambient default: 2)
        id_generator: Callable producing ``localId`` values (ambient default:
            random UUIDs)
        source_file: Optional path recorded in parsed line locations

    Returns:
        Document with no content if no checklist line matched, otherwise
        with exactly one TaskList.

    Raises:
        ConfigError: If indent_size is not a positive integer.

    Example:
        >>> doc = convert("Just some prose.\\n- [x] Only real item")
        >>> [item.text for item in doc.task_list.children]
        ['Only real item']
    """
    return _convert(source, _resolve_config(indent_size, id_generator), source_file)


def to_adf(
    source: str,
    *,
    indent_size: int | None = None,
    id_generator: IdGenerator | None = None,
) -> dict[str, Any]:
    """Convert GFM checklist text into an embeddable ADF dict.

    Same options as ``convert()``.

    Example:
        >>> to_adf("")
        {'type': 'doc', 'version': 1, 'content': []}
    """
    return to_dict(convert(source, indent_size=indent_size, id_generator=id_generator))


class Checklist:
    """Reusable converter bound to one configuration.

    Usage:
        >>> checklist = Checklist(indent_size=4)
        >>> adf = checklist("- [ ] a\\n    - [ ] b")

        >>> # Typed nodes
        >>> doc = checklist.convert("- [x] done")

    Thread Safety:
        Holds only an immutable config. Safe to share across threads when the
        id generator is.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        indent_size: int = DEFAULT_INDENT_SIZE,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._config = ConvertConfig(indent_size=indent_size, id_generator=id_generator)

    @property
    def config(self) -> ConvertConfig:
        return self._config

    def __call__(self, source: str) -> dict[str, Any]:
        """Convert to an ADF dict."""
        return to_dict(self.convert(source))

    def convert(self, source: str, *, source_file: str | None = None) -> Document:
        """Convert to a typed Document."""
        return _convert(source, self._config, source_file)

    def convert_many(self, sources: Iterable[str]) -> list[Document]:
        """Convert several checklists with the same configuration.

        Example:
            >>> docs = Checklist().convert_many(["- [ ] a", "no items"])
            >>> [len(d.children) for d in docs]
            [1, 0]
        """
        return [_convert(source, self._config) for source in sources]

    def __repr__(self) -> str:
        return f"Checklist(indent_size={self._config.indent_size})"


__all__ = [  # noqa: RUF022: grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "convert",
    "to_adf",
    "Checklist",
    # Pipeline stages
    "normalize_source",
    "parse_line",
    "parse_lines",
    "build_tree",
    "serialize",
    "serialize_task_list",
    # Intermediate records
    "ParsedLine",
    "ChecklistNode",
    "TaskState",
    "SourceLocation",
    # Output nodes
    "Node",
    "Block",
    "Document",
    "TaskList",
    "TaskItem",
    "Text",
    # Identifiers
    "IdGenerator",
    "CounterIdGenerator",
    "default_id_generator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    "collect_local_ids",
    "count_items",
    # Configuration (ContextVar-based)
    "ConvertConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
    # Errors
    "CasillasError",
    "ConfigError",
    "SerializationError",
]
