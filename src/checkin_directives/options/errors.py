"""Error types for loading checkin options."""
from __future__ import annotations


class OptionsError(ValueError):
    """Raised when serialized checkin options cannot be loaded.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    key:
        The offending field name, if the problem is tied to one.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)
