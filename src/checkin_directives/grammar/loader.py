r"""Load a ``DirectiveGrammar`` from YAML configuration.

A grammar file overrides any subset of the default grammar's fields::

    # directives.yaml
    work_item_pattern: '^#(?P<action>associate|resolve)\s+(?P<item_id>\d+)$'
    force_pattern: '^#force\s+(?P<reason>.*)$'
    checkin_note_pattern: null        # disable reviewer directives

Pattern strings are compiled with ``re.MULTILINE``.
"""
from __future__ import annotations

import dataclasses
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from checkin_directives.grammar.errors import GrammarError
from checkin_directives.grammar.grammar import DEFAULT_GRAMMAR, DirectiveGrammar

logger = logging.getLogger(__name__)

_PATTERN_FIELDS = ("work_item_pattern", "force_pattern", "checkin_note_pattern")
_KEYWORD_FIELDS = ("associate_keyword", "resolve_keyword")
_KNOWN_FIELDS = frozenset(_PATTERN_FIELDS + _KEYWORD_FIELDS + ("checkin_note_names",))


def _compile(field_name: str, source: Any) -> re.Pattern[str]:
    if not isinstance(source, str):
        raise GrammarError("pattern must be a string", field_name=field_name)
    try:
        return re.compile(source, re.MULTILINE)
    except re.error as exc:
        raise GrammarError(f"invalid regular expression: {exc}", field_name=field_name) from exc


def grammar_from_dict(
    data: dict[str, Any] | None, base: DirectiveGrammar = DEFAULT_GRAMMAR
) -> DirectiveGrammar:
    """Build a grammar by overriding fields of ``base`` with ``data``.

    Parameters
    ----------
    data:
        Mapping of grammar field names to overrides.  ``None`` or an
        empty mapping returns ``base`` unchanged.
    base:
        The grammar supplying every field ``data`` does not override.

    Raises
    ------
    GrammarError
        On unknown keys, invalid regular expressions, patterns missing a
        required named group, or values of the wrong type.
    """
    if not data:
        return base
    if not isinstance(data, dict):
        raise GrammarError(f"grammar must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - _KNOWN_FIELDS)
    if unknown:
        raise GrammarError(f"unknown grammar field(s): {', '.join(unknown)}")

    changes: dict[str, Any] = {}
    for name in _PATTERN_FIELDS:
        if name not in data:
            continue
        if data[name] is None:
            if name != "checkin_note_pattern":
                raise GrammarError("pattern is required", field_name=name)
            changes[name] = None
        else:
            changes[name] = _compile(name, data[name])

    for name in _KEYWORD_FIELDS:
        if name in data:
            value = data[name]
            if not isinstance(value, str) or not value:
                raise GrammarError("keyword must be a non-empty string", field_name=name)
            changes[name] = value

    if "checkin_note_names" in data:
        names = data["checkin_note_names"]
        if not isinstance(names, dict):
            raise GrammarError("must be a mapping", field_name="checkin_note_names")
        changes["checkin_note_names"] = {str(k): str(v) for k, v in names.items()}

    logger.debug("Overriding grammar fields: %s", ", ".join(sorted(changes)))
    return dataclasses.replace(base, **changes)


def load_grammar(path: str | Path, base: DirectiveGrammar = DEFAULT_GRAMMAR) -> DirectiveGrammar:
    """Read a YAML grammar file and return the resulting grammar.

    Raises
    ------
    GrammarError
        If the file is not valid YAML or describes an invalid grammar.
    OSError
        If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GrammarError(f"invalid YAML in {path}: {exc}") from exc
    return grammar_from_dict(data, base=base)
