"""Unit tests for undo/handle.py: UndoHandle revert, composition and
context-manager behaviour.
"""
from __future__ import annotations

import pytest

from checkin_directives.undo import UndoHandle

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _recorder(log: list[str], name: str):
    def _action() -> None:
        log.append(name)

    return _action


# ---------------------------------------------------------------------------
# Single handle
# ---------------------------------------------------------------------------


class TestUndoHandle:
    def test_revert_runs_action(self) -> None:
        log: list[str] = []
        handle = UndoHandle(_recorder(log, "a"))
        handle.revert()
        assert log == ["a"]

    def test_call_is_revert(self) -> None:
        log: list[str] = []
        handle = UndoHandle(_recorder(log, "a"))
        handle()
        assert log == ["a"]

    def test_nothing_runs_until_revert(self) -> None:
        log: list[str] = []
        UndoHandle(_recorder(log, "a"))
        assert log == []

    def test_actions_run_in_given_order(self) -> None:
        log: list[str] = []
        handle = UndoHandle(_recorder(log, "a"), _recorder(log, "b"), _recorder(log, "c"))
        handle.revert()
        assert log == ["a", "b", "c"]

    def test_double_revert_reapplies_same_values(self) -> None:
        state = {"value": "changed"}

        def _restore() -> None:
            state["value"] = "original"

        handle = UndoHandle(_restore)
        handle.revert()
        state["value"] = "changed again"
        handle.revert()
        assert state["value"] == "original"

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError):
            UndoHandle("not callable")  # type: ignore[arg-type]

    def test_len_counts_steps(self) -> None:
        assert len(UndoHandle(lambda: None, lambda: None)) == 2

    def test_noop(self) -> None:
        handle = UndoHandle.noop()
        assert len(handle) == 0
        handle.revert()

    def test_repr(self) -> None:
        assert repr(UndoHandle(lambda: None)) == "UndoHandle(steps=1)"


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class TestCompose:
    def test_compose_handles_in_order(self) -> None:
        log: list[str] = []
        first = UndoHandle(_recorder(log, "install"))
        second = UndoHandle(_recorder(log, "work-items"))
        third = UndoHandle(_recorder(log, "force"))
        UndoHandle.compose(first, second, third).revert()
        assert log == ["install", "work-items", "force"]

    def test_compose_flattens_nested_handles(self) -> None:
        log: list[str] = []
        inner = UndoHandle(_recorder(log, "a"), _recorder(log, "b"))
        combined = UndoHandle.compose(inner, _recorder(log, "c"))
        assert len(combined) == 3
        combined.revert()
        assert log == ["a", "b", "c"]

    def test_compose_with_noop(self) -> None:
        log: list[str] = []
        combined = UndoHandle.compose(UndoHandle.noop(), _recorder(log, "a"))
        combined.revert()
        assert log == ["a"]

    def test_compose_nothing(self) -> None:
        assert len(UndoHandle.compose()) == 0


# ---------------------------------------------------------------------------
# Context manager
# ---------------------------------------------------------------------------


class TestContextManager:
    def test_reverts_on_normal_exit(self) -> None:
        log: list[str] = []
        with UndoHandle(_recorder(log, "a")) as handle:
            assert isinstance(handle, UndoHandle)
            assert log == []
        assert log == ["a"]

    def test_reverts_and_propagates_on_exception(self) -> None:
        log: list[str] = []
        with pytest.raises(RuntimeError, match="checkin failed"):
            with UndoHandle(_recorder(log, "a")):
                raise RuntimeError("checkin failed")
        assert log == ["a"]
