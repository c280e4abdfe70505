"""Scoped undo handles.

Exports ``UndoHandle``, the value returned by every scan.
"""
from __future__ import annotations

from checkin_directives.undo.handle import RestoreAction, UndoHandle

__all__ = [
    "RestoreAction",
    "UndoHandle",
]
