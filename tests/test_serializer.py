"""Tests for forest-to-ADF serialization and the documented scenarios."""

import pytest

from casillas import convert, to_adf
from casillas.ids import CounterIdGenerator
from casillas.lines import TaskState
from casillas.nodes import Document, TaskItem, TaskList, Text
from casillas.serializer import serialize, serialize_task_list
from casillas.tree import ChecklistNode
from casillas.visitor import collect_local_ids


def _convert(source: str, indent_size: int = 2) -> Document:
    return convert(source, indent_size=indent_size, id_generator=CounterIdGenerator())


class TestScenarios:
    """End-to-end conversions."""

    def test_flat_checklist(self) -> None:
        adf = to_adf("- [ ] Buy milk\n- [x] Walk dog", id_generator=CounterIdGenerator())
        assert adf == {
            "type": "doc",
            "version": 1,
            "content": [
                {
                    "type": "taskList",
                    "attrs": {"localId": "id-1"},
                    "content": [
                        {
                            "type": "taskItem",
                            "attrs": {"localId": "id-2", "state": "TODO"},
                            "content": [{"type": "text", "text": "Buy milk"}],
                        },
                        {
                            "type": "taskItem",
                            "attrs": {"localId": "id-3", "state": "DONE"},
                            "content": [{"type": "text", "text": "Walk dog"}],
                        },
                    ],
                }
            ],
        }

    def test_nested_list_is_sibling_of_parent_item(self) -> None:
        doc = _convert("- [ ] Parent\n  - [ ] Child")
        top = doc.task_list
        assert top is not None
        assert len(top.children) == 2
        parent, nested = top.children
        assert isinstance(parent, TaskItem)
        assert parent.text == "Parent"
        assert parent.state is TaskState.TODO
        assert parent.children == (Text(text="Parent"),)
        assert isinstance(nested, TaskList)
        assert [item.text for item in nested.children] == ["Child"]

    def test_prose_line_produces_no_node(self) -> None:
        doc = _convert("Just some prose.\n- [x] Only real item")
        top = doc.task_list
        assert top is not None
        assert len(top.children) == 1
        item = top.children[0]
        assert isinstance(item, TaskItem)
        assert item.text == "Only real item"
        assert item.state is TaskState.DONE

    def test_empty_string(self) -> None:
        assert to_adf("") == {"type": "doc", "version": 1, "content": []}

    def test_deep_nesting_shape(self) -> None:
        source = (
            "- [ ] Checklist item 1\n"
            "- [ ] Checklist item 2\n"
            "  - [ ] Nested checklist item level 1\n"
            "    - [ ] Nested checklist item level 2\n"
            "  - [x] Another nested (checked)\n"
            "- [] Supports - [] too\n"
        )
        top = _convert(source).task_list
        assert top is not None
        kinds = [type(c).__name__ for c in top.children]
        assert kinds == ["TaskItem", "TaskItem", "TaskList", "TaskItem"]
        level1 = top.children[2]
        assert isinstance(level1, TaskList)
        assert [type(c).__name__ for c in level1.children] == ["TaskItem", "TaskList", "TaskItem"]
        last = top.children[3]
        assert isinstance(last, TaskItem)
        assert last.text == "Supports - [] too"


class TestEmptyChecklistDistinction:
    """No matching line means no container at all."""

    @pytest.mark.parametrize("source", ["", "   \n\n", "prose only", "- plain bullet\n# Heading"])
    def test_no_items_means_empty_content(self, source: str) -> None:
        doc = _convert(source)
        assert doc.children == ()
        assert doc.task_list is None

    @pytest.mark.parametrize("source", ["- [ ]", "- [x] a\n- [ ] b", "x\n    - [ ] deep"])
    def test_any_item_means_one_container(self, source: str) -> None:
        doc = _convert(source)
        assert len(doc.children) == 1
        assert isinstance(doc.children[0], TaskList)

    def test_empty_label_keeps_empty_text_node(self) -> None:
        top = _convert("- [ ]").task_list
        assert top is not None
        item = top.children[0]
        assert isinstance(item, TaskItem)
        assert item.children == (Text(text=""),)


class TestIdentifiers:
    """Identifier generation and propagation."""

    def test_ids_unique_within_one_call(self) -> None:
        source = "- [ ] a\n  - [ ] b\n    - [x] c\n  - [ ] d\n- [ ] e\n  - [ ] f"
        ids = collect_local_ids(_convert(source))
        # 6 items + 4 lists (top, under a, under b, under e)
        assert len(ids) == 10
        assert len(set(ids)) == len(ids)

    def test_ids_drawn_in_preorder(self) -> None:
        ids = collect_local_ids(_convert("- [ ] a\n  - [ ] b\n- [ ] c"))
        assert ids == [f"id-{n}" for n in range(1, 6)]

    def test_default_generator_gives_uuids(self) -> None:
        doc = convert("- [ ] a\n- [ ] b")
        ids = collect_local_ids(doc)
        assert len(set(ids)) == 3
        assert all(len(i) == 36 for i in ids)

    def test_plain_function_generator(self) -> None:
        doc = convert("- [ ] a", id_generator=lambda: "fixed")
        assert collect_local_ids(doc) == ["fixed", "fixed"]

    def test_generator_errors_propagate(self) -> None:
        class Boom(RuntimeError):
            pass

        def failing() -> str:
            raise Boom("no ids today")

        with pytest.raises(Boom, match="no ids today"):
            convert("- [ ] a", id_generator=failing)

    def test_generator_not_called_for_empty_input(self) -> None:
        calls: list[int] = []

        def counting() -> str:
            calls.append(1)
            return "x"

        convert("nothing here", id_generator=counting)
        assert calls == []


class TestSerializeDirect:
    """Serializer entry points without the parser."""

    def test_serialize_empty_forest(self) -> None:
        assert serialize([]) == Document(children=())

    def test_serialize_task_list(self) -> None:
        node = ChecklistNode(level=0, state=TaskState.DONE, text="x")
        task_list = serialize_task_list([node], CounterIdGenerator(prefix="n"))
        assert task_list == TaskList(
            local_id="n1",
            children=(TaskItem(local_id="n2", state=TaskState.DONE, children=(Text(text="x"),)),),
        )

    def test_falsy_generator_is_still_used(self) -> None:
        class EmptyLookingIds(CounterIdGenerator):
            def __len__(self) -> int:
                return 0

        ids = EmptyLookingIds(prefix="own-")
        assert not ids
        doc = serialize([ChecklistNode(level=0, state=TaskState.TODO, text="x")], ids)
        assert collect_local_ids(doc) == ["own-1", "own-2"]
