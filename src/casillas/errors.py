"""Exception classes for Casillas.

Conversion itself never raises for text input: non-checklist lines are
skipped and irregular indentation is resolved, not rejected. The errors
below cover invalid configuration and malformed ADF handed to the decoder.
"""

from __future__ import annotations


class CasillasError(Exception):
    """Base exception for all Casillas errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(CasillasError):
    """Invalid conversion option.

    Raised when a ConvertConfig is built with an option outside its domain,
    e.g. a non-positive indent size.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "indent_size")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Invalid option '{option}': {message}")


class SerializationError(CasillasError, ValueError):
    """Malformed ADF data.

    Raised by the ADF decoder when a dict or JSON document does not have the
    doc / taskList / taskItem / text shape.
    """

    def __init__(self, message: str, node_type: str | None = None) -> None:
        self.node_type = node_type
        location = f" (in {node_type!r})" if node_type else ""
        super().__init__(f"{message}{location}")
