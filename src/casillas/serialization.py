"""ADF serialization: typed nodes to/from the Atlassian Document Format.

Produces the JSON-compatible dicts an issue tracker accepts as a rich-text
field value, and reads them back into typed nodes. Useful for:
- Embedding a checklist in an issue create/update payload
- Splicing a taskList into a document produced elsewhere
- Debugging and inspection

Example:
    from casillas import convert
    from casillas.serialization import to_json, from_json

    doc = convert("- [ ] Buy milk")
    json_str = to_json(doc)
    assert from_json(json_str) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import Any

from casillas.errors import SerializationError
from casillas.lines import TaskState
from casillas.nodes import ADF_VERSION, AnyNode, Document, TaskItem, TaskList, Text


def to_dict(node: AnyNode) -> dict[str, Any]:
    """Convert a node to its ADF dict.

    Args:
        node: Any Casillas output node.

    Returns:
        Dict with ADF ``type`` tag and the node's attrs/content.

    """
    match node:
        case Document():
            return {
                "type": Document.adf_type,
                "version": node.version,
                "content": [to_dict(child) for child in node.children],
            }
        case TaskList():
            return {
                "type": TaskList.adf_type,
                "attrs": {"localId": node.local_id},
                "content": [to_dict(child) for child in node.children],
            }
        case TaskItem():
            return {
                "type": TaskItem.adf_type,
                "attrs": {"localId": node.local_id, "state": str(node.state)},
                "content": [to_dict(child) for child in node.children],
            }
        case Text():
            return {"type": Text.adf_type, "text": node.text}
        case _:
            msg = f"Cannot serialize {type(node).__name__}"
            raise TypeError(msg)


def from_dict(data: dict[str, Any]) -> AnyNode:
    """Reconstruct a typed node from an ADF dict.

    Args:
        data: Dict as produced by ``to_dict`` (or returned by the tracker).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If the dict is not a doc, taskList, taskItem
            or text node, or is missing required fields.

    """
    if not isinstance(data, dict):
        msg = f"Expected dict, got {type(data).__name__}"
        raise SerializationError(msg)

    node_type = data.get("type")
    if node_type is None:
        msg = "Missing 'type' field in ADF node"
        raise SerializationError(msg)

    match node_type:
        case "doc":
            children = tuple(_content(data, node_type))
            if not all(isinstance(child, TaskList) for child in children):
                msg = "doc content may only hold taskList nodes"
                raise SerializationError(msg, node_type)
            return Document(children=children, version=data.get("version", ADF_VERSION))
        case "taskList":
            children = tuple(_content(data, node_type))
            if not all(isinstance(child, (TaskItem, TaskList)) for child in children):
                msg = "taskList content may only hold taskItem and taskList nodes"
                raise SerializationError(msg, node_type)
            return TaskList(local_id=_attr(data, "localId", node_type), children=children)
        case "taskItem":
            children = tuple(_content(data, node_type))
            if not all(isinstance(child, Text) for child in children):
                msg = "taskItem content may only hold text nodes"
                raise SerializationError(msg, node_type)
            raw_state = _attr(data, "state", node_type)
            try:
                state = TaskState(raw_state)
            except ValueError:
                msg = f"Unknown task state: {raw_state!r}"
                raise SerializationError(msg, node_type) from None
            return TaskItem(
                local_id=_attr(data, "localId", node_type),
                state=state,
                children=children,
            )
        case "text":
            text = data.get("text")
            if not isinstance(text, str):
                msg = "text node requires a string 'text' field"
                raise SerializationError(msg, node_type)
            return Text(text=text)
        case _:
            msg = f"Unknown node type: {node_type!r}"
            raise SerializationError(msg)


def _content(data: dict[str, Any], node_type: str) -> list[AnyNode]:
    raw = data.get("content", [])
    if not isinstance(raw, list):
        msg = "'content' must be a list"
        raise SerializationError(msg, node_type)
    return [from_dict(item) for item in raw]


def _attr(data: dict[str, Any], name: str, node_type: str) -> Any:
    attrs = data.get("attrs")
    if not isinstance(attrs, dict) or name not in attrs:
        msg = f"Missing attrs.{name}"
        raise SerializationError(msg, node_type)
    return attrs[name]


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to an ADF JSON string.

    Output is deterministic (sorted keys).

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from an ADF JSON string.

    Raises:
        SerializationError: If the JSON is invalid or its root is not a doc.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e.msg}"
        raise SerializationError(msg) from e
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg)
    return node


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
