"""checkin-directives: apply and undo commit message directives on TFS checkin options.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import checkin_directives

    options = checkin_directives.CheckinOptions()
    handle = checkin_directives.scan(
        options,
        "Fix login\\n\\ngit-tfs-work-item: 1234 associate\\ngit-tfs-force: hotfix",
    )
    # Associating with work item 1234
    # Forcing the checkin: hotfix
    options.comment                    # 'Fix login'
    options.work_items_to_associate    # ['1234']
    handle.revert()
    options.comment                    # ''

    checkin_directives.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from checkin_directives.options import CheckinOptions
from checkin_directives.undo import UndoHandle

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from checkin_directives.grammar import DirectiveGrammar
    from checkin_directives.scanner import OutputSink


def scan(
    options: CheckinOptions,
    commit_message: str,
    writer: "OutputSink | None" = None,
    grammar: "DirectiveGrammar | None" = None,
) -> UndoHandle:
    """Apply the directives in ``commit_message`` to ``options``.

    Parameters
    ----------
    options:
        Caller-owned checkin options, mutated in place.
    commit_message:
        The raw commit message.
    writer:
        Output sink for progress lines.  Defaults to ``sys.stdout``.
    grammar:
        Directive grammar.  Defaults to the git-tfs compatible grammar.

    Returns
    -------
    UndoHandle
        Reverts every change the scan made to ``options``.

    Raises
    ------
    checkin_directives.scanner.ScanPreconditionError
        If ``options`` is ``None`` or ``writer`` cannot be written to.
    """
    from checkin_directives.scanner.scanner import scan as _scan

    return _scan(options, commit_message, writer=writer, grammar=grammar)


__all__ = [
    "__version__",
    "CheckinOptions",
    "UndoHandle",
    "scan",
]
