"""Directive scanner: applies commit message directives to checkin options.

A scan runs four passes over one commit message, in order:

1. install the message as the checkin comment;
2. apply work item directives (associate / resolve);
3. apply a single force directive;
4. apply checkin note (reviewer) directives.

Every pass mutates the ``CheckinOptions`` in place and returns the
``UndoHandle`` that reverses it.  The handles are composed in pass order
into the one handle the caller gets back.

Usage
-----
::

    import sys

    from checkin_directives.options import CheckinOptions
    from checkin_directives.scanner import DirectiveScanner

    options = CheckinOptions()
    scanner = DirectiveScanner(sys.stdout)
    with scanner.scan(options, commit_message):
        tfs.checkin(options)
    # options are back to their pre-scan state here

The caller must revert the handle on every exit path.  A handle that is
never reverted leaves the options in their post-scan state.
"""
from __future__ import annotations

import logging
import sys
from typing import Protocol

from checkin_directives.grammar import DEFAULT_GRAMMAR, DirectiveGrammar, WorkItemAction
from checkin_directives.options import CheckinOptions
from checkin_directives.scanner.errors import ScanPreconditionError
from checkin_directives.undo import UndoHandle

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    """Anything with a text ``write`` method, e.g. ``sys.stdout``."""

    def write(self, text: str, /) -> object: ...


class DirectiveScanner:
    """Applies commit message directives to ``CheckinOptions``.

    Parameters
    ----------
    writer:
        Receives one human-readable line per directive acted on.
    grammar:
        The patterns that recognize directives.  Defaults to the
        git-tfs compatible grammar.

    Raises
    ------
    ScanPreconditionError
        If ``writer`` has no callable ``write`` method.
    """

    def __init__(
        self,
        writer: OutputSink,
        grammar: DirectiveGrammar = DEFAULT_GRAMMAR,
    ) -> None:
        if writer is None or not callable(getattr(writer, "write", None)):
            raise ScanPreconditionError("An output sink with a write() method is required")
        self._writer = writer
        self._grammar = grammar

    @property
    def grammar(self) -> DirectiveGrammar:
        """The grammar this scanner matches directives with."""
        return self._grammar

    def scan(self, options: CheckinOptions, commit_message: str) -> UndoHandle:
        """Apply every directive in ``commit_message`` to ``options``.

        Parameters
        ----------
        options:
            The caller-owned checkin options.  They need not be fresh;
            prior values are snapshotted and restored by the handle.
        commit_message:
            The raw commit message.  May be empty.

        Returns
        -------
        UndoHandle
            Restores ``comment``, ``force``, ``override_reason`` and
            ``checkin_notes`` to their pre-scan values and clears both
            work item lists.

        Raises
        ------
        ScanPreconditionError
            If ``options`` is ``None`` or ``commit_message`` is not a string.
        """
        if options is None:
            raise ScanPreconditionError("Checkin options are required")
        if not isinstance(commit_message, str):
            raise ScanPreconditionError(
                f"Commit message must be a string, got {type(commit_message).__name__}"
            )

        restore_comment = self._install_comment(options, commit_message)
        undo_work_items = self._apply_work_items(options)
        undo_force = self._apply_force(options)
        undo_notes = self._apply_checkin_notes(options)

        return UndoHandle.compose(restore_comment, undo_work_items, undo_force, undo_notes)

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _install_comment(self, options: CheckinOptions, commit_message: str) -> UndoHandle:
        original_comment = options.comment
        options.comment = commit_message

        def _restore() -> None:
            options.comment = original_comment

        return UndoHandle(_restore)

    def _apply_work_items(self, options: CheckinOptions) -> UndoHandle:
        directives = self._grammar.work_items(options.comment)
        for directive in directives:
            if directive.action is WorkItemAction.ASSOCIATE:
                self._notify(f"Associating with work item {directive.item_id}")
                options.work_items_to_associate.append(directive.item_id)
            elif directive.action is WorkItemAction.RESOLVE:
                self._notify(f"Resolving work item {directive.item_id}")
                options.work_items_to_resolve.append(directive.item_id)
            else:
                logger.debug(
                    "Ignoring work item %s with unrecognized action %r",
                    directive.item_id,
                    directive.keyword,
                )
        if directives:
            options.comment = self._grammar.strip(self._grammar.work_item_pattern, options.comment)
        logger.debug("Work item pass matched %d directive(s)", len(directives))

        def _clear() -> None:
            options.work_items_to_associate.clear()
            options.work_items_to_resolve.clear()

        return UndoHandle(_clear)

    def _apply_force(self, options: CheckinOptions) -> UndoHandle:
        original_force = options.force
        original_reason = options.override_reason

        reasons = self._grammar.force_reasons(options.comment)
        if len(reasons) == 1:
            reason = reasons[0]
            if reason.strip():
                self._notify(f"Forcing the checkin: {reason}")
                options.force = True
                options.override_reason = reason
            else:
                logger.debug("Force directive has no reason; leaving force unchanged")
            options.comment = self._grammar.strip(self._grammar.force_pattern, options.comment)
        elif reasons:
            logger.debug("Ignoring %d force directives; expected at most one", len(reasons))

        def _restore() -> None:
            options.force = original_force
            options.override_reason = original_reason

        return UndoHandle(_restore)

    def _apply_checkin_notes(self, options: CheckinOptions) -> UndoHandle:
        pattern = self._grammar.checkin_note_pattern
        if pattern is None:
            return UndoHandle.noop()

        original_notes = dict(options.checkin_notes)
        directives = self._grammar.checkin_notes(options.comment)
        for directive in directives:
            if directive.name is None or not directive.value.strip():
                logger.debug("Ignoring checkin note directive %r", directive.text)
                continue
            self._notify(f"Setting checkin note {directive.name}: {directive.value}")
            options.checkin_notes[directive.name] = directive.value
        if directives:
            options.comment = self._grammar.strip(pattern, options.comment)

        def _restore() -> None:
            options.checkin_notes.clear()
            options.checkin_notes.update(original_notes)

        return UndoHandle(_restore)

    def _notify(self, line: str) -> None:
        self._writer.write(line + "\n")


def scan(
    options: CheckinOptions,
    commit_message: str,
    writer: OutputSink | None = None,
    grammar: DirectiveGrammar | None = None,
) -> UndoHandle:
    """Convenience function: scan ``commit_message`` with a one-off scanner.

    Parameters
    ----------
    options:
        The checkin options to mutate.
    commit_message:
        The raw commit message.
    writer:
        Output sink for progress lines.  Defaults to ``sys.stdout``.
    grammar:
        Directive grammar.  Defaults to the git-tfs compatible grammar.

    Returns
    -------
    UndoHandle
        The handle that reverses the scan.
    """
    scanner = DirectiveScanner(
        writer if writer is not None else sys.stdout,
        grammar if grammar is not None else DEFAULT_GRAMMAR,
    )
    return scanner.scan(options, commit_message)
