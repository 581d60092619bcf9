"""Tests for the high-level Casillas API."""

import pytest


class TestConvertFunction:
    """Tests for convert() and to_adf()."""

    def test_convert_returns_document(self) -> None:
        from casillas import Document, convert

        doc = convert("- [ ] a")
        assert isinstance(doc, Document)
        assert doc.version == 1

    def test_to_adf_matches_to_dict(self) -> None:
        from casillas import CounterIdGenerator, convert, to_adf, to_dict

        source = "- [ ] a\n  - [x] b"
        assert to_adf(source, id_generator=CounterIdGenerator()) == to_dict(
            convert(source, id_generator=CounterIdGenerator())
        )

    def test_indent_size_option(self) -> None:
        from casillas import TaskList, convert

        doc = convert("- [ ] a\n    - [ ] b", indent_size=4)
        top = doc.task_list
        assert top is not None
        assert isinstance(top.children[1], TaskList)

        # With indent 8 the second line is a sibling
        flat = convert("- [ ] a\n    - [ ] b", indent_size=8).task_list
        assert flat is not None
        assert len(flat.children) == 2

    def test_invalid_indent_size(self) -> None:
        from casillas import ConfigError, convert

        with pytest.raises(ConfigError):
            convert("- [ ] a", indent_size=0)

    def test_ambient_config_fills_unset_options(self) -> None:
        from casillas import ConvertConfig, CounterIdGenerator, convert, convert_config_context
        from casillas.visitor import collect_local_ids

        config = ConvertConfig(indent_size=4, id_generator=CounterIdGenerator(prefix="amb-"))
        with convert_config_context(config):
            doc = convert("- [ ] a\n    - [ ] b")
        assert collect_local_ids(doc) == ["amb-1", "amb-2", "amb-3", "amb-4"]

    def test_explicit_options_win_over_ambient(self) -> None:
        from casillas import ConvertConfig, CounterIdGenerator, convert, convert_config_context

        with convert_config_context(ConvertConfig(indent_size=4)):
            doc = convert("- [ ] a\n  - [ ] b", indent_size=2, id_generator=CounterIdGenerator())
        top = doc.task_list
        assert top is not None
        assert [type(c).__name__ for c in top.children] == ["TaskItem", "TaskList"]

    def test_logs_conversion_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        from casillas import convert

        with caplog.at_level("DEBUG", logger="casillas"):
            convert("- [ ] a\n  - [ ] b\n- [ ] c")
        assert "Converted 3 checklist lines into 2 top-level items" in caplog.text


class TestChecklistClass:
    """Tests for the reusable Checklist converter."""

    def test_call_returns_adf_dict(self) -> None:
        from casillas import Checklist, CounterIdGenerator

        checklist = Checklist(id_generator=CounterIdGenerator())
        adf = checklist("- [x] done")
        assert adf["type"] == "doc"
        assert adf["content"][0]["content"][0]["attrs"] == {"localId": "id-2", "state": "DONE"}

    def test_convert_many(self) -> None:
        from casillas import Checklist

        docs = Checklist().convert_many(["- [ ] a", "", "- [ ] b\n- [ ] c"])
        assert [len(d.children) for d in docs] == [1, 0, 1]

    def test_config_is_bound(self) -> None:
        from casillas import Checklist

        checklist = Checklist(indent_size=3)
        assert checklist.config.indent_size == 3
        assert repr(checklist) == "Checklist(indent_size=3)"

    def test_invalid_config_raises_at_construction(self) -> None:
        from casillas import Checklist, ConfigError

        with pytest.raises(ConfigError, match="indent_size"):
            Checklist(indent_size=-2)

    def test_ignores_ambient_config(self) -> None:
        from casillas import Checklist, ConvertConfig, convert_config_context

        with convert_config_context(ConvertConfig(indent_size=8)):
            doc = Checklist().convert("- [ ] a\n  - [ ] b")
        top = doc.task_list
        assert top is not None
        assert [type(c).__name__ for c in top.children] == ["TaskItem", "TaskList"]


class TestSplicing:
    """The top-level task list can be lifted into another ADF document."""

    def test_task_list_lifts_into_larger_doc(self) -> None:
        from casillas import to_adf

        heading = {
            "type": "heading",
            "attrs": {"level": 1},
            "content": [{"type": "text", "text": "Plan"}],
        }
        checklist = to_adf("- [ ] a")["content"][0]
        hybrid = {"type": "doc", "version": 1, "content": [heading, checklist]}
        assert hybrid["content"][1]["type"] == "taskList"
