"""Source location tracking for parsed checklist lines.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a checklist line in the original input.
    
    Both positions are 1-indexed. ``col_offset`` points at the bullet
    marker, measured after tab expansion.
    
    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5)
            >>> str(loc)
            '3:5'
        
    """

    lineno: int
    col_offset: int = 1
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log messages.

        Returns:
            Formatted string like "todo.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
