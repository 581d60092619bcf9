"""Tests for Casillas utility modules."""

from casillas.location import SourceLocation
from casillas.utils.logger import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "casillas.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("casillas").name == "casillas"
        assert get_logger("casillas.lines").name == "casillas.lines"


class TestSourceLocation:
    def test_str(self) -> None:
        assert str(SourceLocation(lineno=3, col_offset=5)) == "3:5"

    def test_str_with_file(self) -> None:
        assert str(SourceLocation(4, 1, "todo.md")) == "todo.md:4:1"

    def test_unknown(self) -> None:
        assert SourceLocation.unknown() == SourceLocation(lineno=0, col_offset=0)
