"""Serializer: ChecklistNode forest to typed ADF nodes.

Each run of siblings becomes one TaskList. An item's children become a
nested TaskList appended right after the item, inside the same content
tuple. Identifiers are drawn in pre-order: the container first, then
each item followed by its nested container.

Example:
    >>> from casillas.ids import CounterIdGenerator
    >>> from casillas.lines import parse_lines
    >>> from casillas.tree import build_tree
    >>> forest = build_tree(parse_lines("- [ ] a\\n  - [x] b"))
    >>> doc = serialize(forest, CounterIdGenerator())
    >>> [type(c).__name__ for c in doc.task_list.children]
    ['TaskItem', 'TaskList']

"""

from __future__ import annotations

from collections.abc import Sequence

from casillas.ids import IdGenerator, default_id_generator
from casillas.nodes import Block, Document, TaskItem, TaskList, Text
from casillas.tree import ChecklistNode


def serialize_task_list(nodes: Sequence[ChecklistNode], id_generator: IdGenerator) -> TaskList:
    """Serialize a run of sibling nodes into one TaskList.

    Exceptions raised by ``id_generator`` propagate unchanged.
    """
    local_id = id_generator()
    content: list[Block] = []

    for node in nodes:
        content.append(
            TaskItem(
                local_id=id_generator(),
                state=node.state,
                children=(Text(text=node.text),),
            )
        )
        if node.children:
            content.append(serialize_task_list(node.children, id_generator))

    return TaskList(local_id=local_id, children=tuple(content))


def serialize(
    forest: Sequence[ChecklistNode],
    id_generator: IdGenerator | None = None,
) -> Document:
    """Wrap the forest in a Document.

    An empty forest yields a Document with no content; anything else yields
    exactly one top-level TaskList.
    """
    if not forest:
        return Document(children=())

    ids = default_id_generator if id_generator is None else id_generator
    return Document(children=(serialize_task_list(forest, ids),))


__all__ = [
    "serialize",
    "serialize_task_list",
]
