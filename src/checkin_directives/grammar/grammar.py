"""Directive grammar for commit messages.

A commit message may carry special lines that change how the changeset
is checked in.  The default grammar follows the git-tfs conventions,
one directive per line::

    git-tfs-work-item: 1234 associate
    git-tfs-work-item: 5678 resolve
    git-tfs-force: build server is down
    git-tfs-code-reviewer: Jane Doe

Every pattern is compiled with ``re.MULTILINE`` so that ``^`` and ``$``
anchor to message lines.  Horizontal whitespace is written as
``[^\\S\\n]`` so that a trailing ``\\r`` from CRLF messages is consumed
by the directive rather than left behind.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from checkin_directives.grammar.directives import (
    CheckinNoteDirective,
    WorkItemAction,
    WorkItemDirective,
)
from checkin_directives.grammar.errors import GrammarError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TRIM_CHARS: Final[str] = " \r\n"

_HSPACE: Final[str] = r"[^\S\n]"

WORK_ITEM_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^{_HSPACE}*git-tfs-work-item:{_HSPACE}*(?P<item_id>\d+)"
    rf"(?:{_HSPACE}+(?P<action>\w+))?{_HSPACE}*$",
    re.MULTILINE,
)

FORCE_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^{_HSPACE}*git-tfs-force:{_HSPACE}*(?P<reason>[^\n]*?){_HSPACE}*$",
    re.MULTILINE,
)

CHECKIN_NOTE_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^{_HSPACE}*git-tfs-(?P<note>[a-z]+)-reviewer:{_HSPACE}*(?P<value>[^\n]*?){_HSPACE}*$",
    re.MULTILINE,
)

DEFAULT_CHECKIN_NOTE_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "code": "Code Reviewer",
        "security": "Security Reviewer",
        "performance": "Performance Reviewer",
    }
)

REQUIRED_GROUPS: Final[dict[str, tuple[str, ...]]] = {
    "work_item_pattern": ("action", "item_id"),
    "force_pattern": ("reason",),
    "checkin_note_pattern": ("note", "value"),
}


def require_groups(pattern: re.Pattern[str], field_name: str) -> None:
    """Raise ``GrammarError`` if ``pattern`` lacks a named group it must capture."""
    missing = [g for g in REQUIRED_GROUPS[field_name] if g not in pattern.groupindex]
    if missing:
        raise GrammarError(
            f"pattern {pattern.pattern!r} is missing named group(s): {', '.join(missing)}",
            field_name=field_name,
        )


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DirectiveGrammar:
    """The set of patterns that recognize directives.

    Parameters
    ----------
    work_item_pattern:
        Matches a work item directive.  Must define the named groups
        ``action`` and ``item_id``.
    force_pattern:
        Matches a forced checkin directive.  Must define ``reason``.
    associate_keyword:
        Action keyword that associates a work item.
    resolve_keyword:
        Action keyword that resolves a work item.
    checkin_note_pattern:
        Matches a checkin note directive, with named groups ``note`` and
        ``value``.  ``None`` disables checkin note directives.
    checkin_note_names:
        Maps the captured ``note`` key to the TFS checkin note name.
    """

    work_item_pattern: re.Pattern[str] = WORK_ITEM_PATTERN
    force_pattern: re.Pattern[str] = FORCE_PATTERN
    associate_keyword: str = "associate"
    resolve_keyword: str = "resolve"
    checkin_note_pattern: re.Pattern[str] | None = CHECKIN_NOTE_PATTERN
    checkin_note_names: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_CHECKIN_NOTE_NAMES, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "checkin_note_names", MappingProxyType(dict(self.checkin_note_names))
        )
        require_groups(self.work_item_pattern, "work_item_pattern")
        require_groups(self.force_pattern, "force_pattern")
        if self.checkin_note_pattern is not None:
            require_groups(self.checkin_note_pattern, "checkin_note_pattern")
        if self.associate_keyword == self.resolve_keyword:
            raise GrammarError(
                f"associate and resolve keywords must differ, both are {self.associate_keyword!r}"
            )

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def classify(self, keyword: str) -> WorkItemAction:
        """Map a raw action keyword to a ``WorkItemAction``."""
        if keyword == self.associate_keyword:
            return WorkItemAction.ASSOCIATE
        if keyword == self.resolve_keyword:
            return WorkItemAction.RESOLVE
        return WorkItemAction.UNRECOGNIZED

    def work_items(self, text: str) -> list[WorkItemDirective]:
        """Return every work item directive in ``text``, in match order."""
        directives: list[WorkItemDirective] = []
        for match in self.work_item_pattern.finditer(text):
            keyword = match.group("action") or ""
            directives.append(
                WorkItemDirective(
                    action=self.classify(keyword),
                    item_id=match.group("item_id") or "",
                    keyword=keyword,
                    text=match.group(0),
                )
            )
        return directives

    def force_reasons(self, text: str) -> list[str]:
        """Return the captured reason of every force directive in ``text``."""
        return [match.group("reason") or "" for match in self.force_pattern.finditer(text)]

    def checkin_notes(self, text: str) -> list[CheckinNoteDirective]:
        """Return every checkin note directive in ``text``, in match order."""
        if self.checkin_note_pattern is None:
            return []
        directives: list[CheckinNoteDirective] = []
        for match in self.checkin_note_pattern.finditer(text):
            key = match.group("note") or ""
            directives.append(
                CheckinNoteDirective(
                    key=key,
                    name=self.checkin_note_names.get(key),
                    value=match.group("value") or "",
                    text=match.group(0),
                )
            )
        return directives

    @staticmethod
    def strip(pattern: re.Pattern[str], text: str) -> str:
        """Remove every match of ``pattern`` and trim spaces and line breaks."""
        return pattern.sub("", text).strip(TRIM_CHARS)


DEFAULT_GRAMMAR: Final[DirectiveGrammar] = DirectiveGrammar()
