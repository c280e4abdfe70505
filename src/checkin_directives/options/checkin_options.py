"""The checkin options record.

``CheckinOptions`` is owned by the caller and usually lives for the
whole process.  A scan temporarily rewrites some of its fields and hands
back an ``UndoHandle`` that puts them back.  One instance must not be
shared between concurrent checkin attempts.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CheckinOptions:
    """Parameters of a single TFS checkin.

    Parameters
    ----------
    comment:
        The checkin comment sent with the changeset.
    work_items_to_associate:
        Work item ids to link to the changeset, in directive order.
        Duplicates are kept.
    work_items_to_resolve:
        Work item ids to resolve with the changeset, in directive order.
    force:
        When ``True`` the checkin bypasses gated checkin policies.
    override_reason:
        Policy override reason.  Only meaningful when ``force`` is set.
    checkin_notes:
        TFS checkin notes keyed by note name, e.g. ``"Code Reviewer"``.
    """

    comment: str = ""
    work_items_to_associate: list[str] = field(default_factory=list)
    work_items_to_resolve: list[str] = field(default_factory=list)
    force: bool = False
    override_reason: str = ""
    checkin_notes: dict[str, str] = field(default_factory=dict)

    @property
    def has_work_items(self) -> bool:
        """Return True if any work item will be associated or resolved."""
        return bool(self.work_items_to_associate or self.work_items_to_resolve)
