"""Serialization of ``CheckinOptions`` to and from JSON and YAML.

The serialized form is a flat mapping whose keys are the dataclass
field names.  Missing keys take their defaults; unknown keys are
rejected so that typos in a configuration file do not pass silently.

Usage
-----
::

    from checkin_directives.options import OptionsSerializer

    serializer = OptionsSerializer()
    text = serializer.to_yaml(options)
    options2 = serializer.from_yaml(text)
    assert options == options2
"""
from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import yaml

from checkin_directives.options.checkin_options import CheckinOptions
from checkin_directives.options.errors import OptionsError

_FIELD_NAMES = frozenset(f.name for f in fields(CheckinOptions))


class OptionsSerializer:
    """Convert ``CheckinOptions`` to plain data and back."""

    # ------------------------------------------------------------------
    # dict helpers
    # ------------------------------------------------------------------

    def to_dict(self, options: CheckinOptions) -> dict[str, Any]:
        """Return a plain-data copy of ``options``."""
        return {
            "comment": options.comment,
            "work_items_to_associate": list(options.work_items_to_associate),
            "work_items_to_resolve": list(options.work_items_to_resolve),
            "force": options.force,
            "override_reason": options.override_reason,
            "checkin_notes": dict(options.checkin_notes),
        }

    def from_dict(self, data: dict[str, Any] | None) -> CheckinOptions:
        """Build ``CheckinOptions`` from a mapping.

        Raises
        ------
        OptionsError
            If ``data`` is not a mapping, holds unknown keys, or a value
            has the wrong type.
        """
        if data is None:
            return CheckinOptions()
        if not isinstance(data, dict):
            raise OptionsError(
                f"Checkin options must be a mapping, got {type(data).__name__}"
            )

        unknown = sorted(set(data) - _FIELD_NAMES)
        if unknown:
            raise OptionsError(
                f"Unknown checkin option(s): {', '.join(unknown)}", key=unknown[0]
            )

        options = CheckinOptions()
        if "comment" in data:
            options.comment = _expect_str(data, "comment")
        if "work_items_to_associate" in data:
            options.work_items_to_associate = _expect_id_list(data, "work_items_to_associate")
        if "work_items_to_resolve" in data:
            options.work_items_to_resolve = _expect_id_list(data, "work_items_to_resolve")
        if "force" in data:
            value = data["force"]
            if not isinstance(value, bool):
                raise OptionsError("'force' must be a boolean", key="force")
            options.force = value
        if "override_reason" in data:
            options.override_reason = _expect_str(data, "override_reason")
        if "checkin_notes" in data:
            notes = data["checkin_notes"] or {}
            if not isinstance(notes, dict):
                raise OptionsError("'checkin_notes' must be a mapping", key="checkin_notes")
            options.checkin_notes = {str(k): _expect_str(notes, k) for k in notes}
        return options

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, options: CheckinOptions, indent: int = 2) -> str:
        """Serialize ``options`` to a JSON string."""
        return json.dumps(self.to_dict(options), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> CheckinOptions:
        """Deserialize ``CheckinOptions`` from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise OptionsError(f"Invalid JSON: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, options: CheckinOptions) -> str:
        """Serialize ``options`` to a YAML string."""
        return yaml.dump(self.to_dict(options), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> CheckinOptions:
        """Deserialize ``CheckinOptions`` from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise OptionsError(f"Invalid YAML: {exc}") from exc
        return self.from_dict(data)


def _expect_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if value is None:
        return ""
    if not isinstance(value, str):
        raise OptionsError(f"{key!r} must be a string", key=key)
    return value


def _expect_id_list(data: dict[str, Any], key: str) -> list[str]:
    value = data[key]
    if value is None:
        return []
    if not isinstance(value, list):
        raise OptionsError(f"{key!r} must be a list of work item ids", key=key)
    # YAML reads bare ids as ints
    return [str(item) for item in value]
