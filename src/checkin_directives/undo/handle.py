"""Composable undo handle.

An ``UndoHandle`` holds an ordered list of zero-argument restore
actions.  Reverting the handle runs every action in list order.  Handles
compose: several handles (or bare callables) can be bundled into one
whose revert runs all of their steps.

Usage
-----
::

    from checkin_directives.undo import UndoHandle

    original = options.comment
    options.comment = "temporary"

    def _restore() -> None:
        options.comment = original

    with UndoHandle(_restore):
        do_checkin(options)
    # options.comment is back to its original value here
"""
from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Union

RestoreAction = Callable[[], None]


class UndoHandle:
    """Ordered bundle of restore actions.

    Parameters
    ----------
    actions:
        Zero or more restore callables.  They run in the order given.

    Notes
    -----
    Reverting twice simply runs the same restore steps again.  The steps
    re-assign snapshot values, so a second revert leaves the state
    exactly as the first one did.
    """

    def __init__(self, *actions: RestoreAction) -> None:
        for action in actions:
            if not callable(action):
                raise TypeError(f"Restore action must be callable, got {action!r}")
        self._actions: tuple[RestoreAction, ...] = actions

    @classmethod
    def compose(cls, *parts: Union["UndoHandle", RestoreAction]) -> "UndoHandle":
        """Bundle handles and bare callables into a single handle.

        Nested handles are flattened so the result holds their steps in
        the same order they would have run individually.
        """
        actions: list[RestoreAction] = []
        for part in parts:
            if isinstance(part, UndoHandle):
                actions.extend(part._actions)
            else:
                actions.append(part)
        return cls(*actions)

    @classmethod
    def noop(cls) -> "UndoHandle":
        """Return a handle whose revert does nothing."""
        return cls()

    def revert(self) -> None:
        """Run every restore action in order."""
        for action in self._actions:
            action()

    def __call__(self) -> None:
        self.revert()

    def __len__(self) -> int:
        return len(self._actions)

    def __enter__(self) -> "UndoHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.revert()

    def __repr__(self) -> str:
        return f"UndoHandle(steps={len(self._actions)})"
