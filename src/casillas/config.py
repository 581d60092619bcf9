"""ContextVar-based conversion configuration for Casillas.

Provides context-local defaults using Python's ContextVars (PEP 567).
Explicit arguments to ``convert()`` always win over the ambient config;
the ambient config only fills in what the caller left unset.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from casillas import convert
    from casillas.config import ConvertConfig, convert_config_context

    with convert_config_context(ConvertConfig(indent_size=4)):
        doc = convert("- [ ] a\\n    - [x] b")

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from casillas.errors import ConfigError

if TYPE_CHECKING:
    from casillas.ids import IdGenerator

DEFAULT_INDENT_SIZE = 2


def check_indent_size(size: int) -> None:
    """Raise ConfigError unless size is a positive int (bool excluded)."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigError("indent_size", f"expected int, got {type(size).__name__}")
    if size < 1:
        raise ConfigError("indent_size", f"must be positive, got {size}")


# camelCase spellings used by the issue-tracker integration payloads
_ALIASES = {
    "indentSize": "indent_size",
    "idGenerator": "id_generator",
    "uuid": "id_generator",
}


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        indent_size: Spaces per nesting level. Used both to expand tabs and
            to compute an item's depth as ``indent // indent_size``.
        id_generator: No-argument callable producing unique ids. None selects
            the default UUID generator.

    """

    indent_size: int = DEFAULT_INDENT_SIZE
    id_generator: IdGenerator | None = None

    def __post_init__(self) -> None:
        check_indent_size(self.indent_size)
        if self.id_generator is not None and not callable(self.id_generator):
            raise ConfigError("id_generator", "must be callable")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ConvertConfig":
        """Create ConvertConfig from a mapping.

        Accepts the snake_case field names as well as the camelCase option
        names (``indentSize``, ``idGenerator``) used by JSON payloads.
        Unknown keys are silently ignored.

        Example:
            >>> ConvertConfig.from_dict({"indentSize": 4, "other": 1}).indent_size
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get the current conversion configuration (context-local)."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to the module-level default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with convert_config_context(ConvertConfig(indent_size=4)):
        ...     get_convert_config().indent_size
        4

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "DEFAULT_INDENT_SIZE",
    "ConvertConfig",
    "check_indent_size",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
]
