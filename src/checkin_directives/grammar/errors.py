"""Error types for directive grammar configuration."""
from __future__ import annotations


class GrammarError(ValueError):
    """Raised when a directive grammar is invalid.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    field_name:
        The grammar field the problem was found in, if any.
    """

    def __init__(self, message: str, field_name: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(message if field_name is None else f"{field_name}: {message}")
