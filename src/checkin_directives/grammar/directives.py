"""Tagged results produced by matching directives against a message.

The grammar turns each regular-expression match into one of these
values so that the scanner can switch on an enum instead of looking up
capture groups by name.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class WorkItemAction(Enum):
    """What a work item directive asks for.

    ASSOCIATE
        Link the work item to the changeset.
    RESOLVE
        Link the work item and mark it resolved.
    UNRECOGNIZED
        The directive matched but its action keyword is unknown or
        missing.  Such directives are stripped from the comment and
        otherwise ignored.
    """

    ASSOCIATE = auto()
    RESOLVE = auto()
    UNRECOGNIZED = auto()


@dataclass(frozen=True)
class WorkItemDirective:
    """One matched work item directive.

    Parameters
    ----------
    action:
        The classified action keyword.
    item_id:
        The work item identifier as written in the message.
    keyword:
        The raw action keyword, empty when the directive had none.
    text:
        The full matched substring.
    """

    action: WorkItemAction
    item_id: str
    keyword: str
    text: str


@dataclass(frozen=True)
class CheckinNoteDirective:
    """One matched checkin note directive.

    ``name`` is ``None`` when the captured note key has no entry in the
    grammar's note-name table.
    """

    key: str
    name: str | None
    value: str
    text: str
