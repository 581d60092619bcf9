"""Typed ADF output nodes for Casillas.

All nodes are frozen dataclasses with slots for:
- Type safety: the four node kinds form a closed union
- Immutability: Safe sharing across threads
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Document   ADF "doc"
├── TaskList   ADF "taskList"
├── TaskItem   ADF "taskItem"
└── Text       ADF "text"

Nesting convention:
A taskList holding an item's children is a *sibling* placed right after
that taskItem in the enclosing taskList, never a child of the taskItem::

    TaskList
    ├── TaskItem  "Parent"
    ├── TaskList
    │   └── TaskItem  "Child"
    └── TaskItem  "Next"

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from casillas.lines import TaskState

ADF_VERSION = 1


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all output nodes.

    ``adf_type`` is the node's ``type`` tag in the ADF wire format.

    """

    adf_type: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Label of a task item. May be the empty string."""

    adf_type: ClassVar[str] = "text"

    text: str


@dataclass(frozen=True, slots=True)
class TaskItem(Node):
    """A single checklist entry.

    ADF: {"type": "taskItem", "attrs": {"localId", "state"}, "content": [text]}

    """

    adf_type: ClassVar[str] = "taskItem"

    local_id: str
    state: TaskState
    children: tuple[Text, ...] = ()

    @property
    def text(self) -> str:
        """Concatenated label text."""
        return "".join(child.text for child in self.children)

    @property
    def done(self) -> bool:
        return self.state is TaskState.DONE


@dataclass(frozen=True, slots=True)
class TaskList(Node):
    """An ordered group of task items and nested task lists.

    ADF: {"type": "taskList", "attrs": {"localId"}, "content": [...]}

    """

    adf_type: ClassVar[str] = "taskList"

    local_id: str
    children: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class Document(Node):
    """ADF document envelope.

    ``children`` is empty when the input held no checklist lines, and holds
    exactly one TaskList otherwise.

    """

    adf_type: ClassVar[str] = "doc"

    children: tuple[TaskList, ...] = ()
    version: int = ADF_VERSION

    @property
    def task_list(self) -> TaskList | None:
        """The top-level task list, for splicing into a larger document."""
        return self.children[0] if self.children else None


# Content of a TaskList
type Block = TaskItem | TaskList

type AnyNode = Document | TaskList | TaskItem | Text


__all__ = [
    "ADF_VERSION",
    "AnyNode",
    "Block",
    "Document",
    "Node",
    "TaskItem",
    "TaskList",
    "Text",
]
