"""AST Visitor and Transformer for Casillas output nodes.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example: count completed items:

    class DoneCounter(BaseVisitor[None]):
        def __init__(self) -> None:
            self.done = 0

        def visit_task_item(self, node: TaskItem) -> None:
            self.done += node.done

    counter = DoneCounter()
    counter.visit(doc)

Example: reset every item to TODO:

    def reopen(node: Node) -> Node:
        if isinstance(node, TaskItem):
            return dataclasses.replace(node, state=TaskState.TODO)
        return node

    new_doc = transform(doc, reopen)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from casillas.nodes import Document, Node, TaskItem, TaskList, Text


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call, in document order.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_task_list(self, node: TaskList) -> T:
        return self.visit_default(node)

    def visit_task_item(self, node: TaskItem) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case TaskList():
                return self.visit_task_list(node)
            case TaskItem():
                return self.visit_task_item(node)
            case Text():
                return self.visit_text(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Document(children=children) | TaskList(children=children) | TaskItem(
                children=children
            ):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Text is a leaf


class _IdCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.ids: list[str] = []

    def visit_task_list(self, node: TaskList) -> None:
        self.ids.append(node.local_id)

    def visit_task_item(self, node: TaskItem) -> None:
        self.ids.append(node.local_id)


class _ItemCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.done = 0
        self.total = 0

    def visit_task_item(self, node: TaskItem) -> None:
        self.total += 1
        if node.done:
            self.done += 1


def collect_local_ids(node: Node) -> list[str]:
    """Return every ``localId`` in the tree, in pre-order."""
    collector = _IdCollector()
    collector.visit(node)
    return collector.ids


def count_items(node: Node) -> tuple[int, int]:
    """Return ``(done, total)`` task item counts for the tree."""
    counter = _ItemCounter()
    counter.visit(node)
    return counter.done, counter.total


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent receives its new children. Return ``None`` to remove a node.
    Removing a TaskItem leaves the nested TaskList that follows it in place;
    remove both if that is what you mean. The root Document cannot be
    removed; returning None for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    match node:
        case Document(children=children) | TaskList(children=children) | TaskItem(
            children=children
        ):
            new_children = tuple(
                result for c in children if (result := _transform_node(c, fn)) is not None
            )
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass

    return node


__all__ = [
    "BaseVisitor",
    "collect_local_ids",
    "count_items",
    "transform",
]
