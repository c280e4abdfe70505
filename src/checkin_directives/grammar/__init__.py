"""Directive grammar module.

Exports the ``DirectiveGrammar`` that recognizes directives in commit
messages, the default git-tfs compatible grammar, the tagged match
results, and the YAML loader used to override patterns.
"""
from __future__ import annotations

from checkin_directives.grammar.directives import (
    CheckinNoteDirective,
    WorkItemAction,
    WorkItemDirective,
)
from checkin_directives.grammar.errors import GrammarError
from checkin_directives.grammar.grammar import (
    DEFAULT_CHECKIN_NOTE_NAMES,
    DEFAULT_GRAMMAR,
    TRIM_CHARS,
    DirectiveGrammar,
)
from checkin_directives.grammar.loader import grammar_from_dict, load_grammar

__all__ = [
    "CheckinNoteDirective",
    "WorkItemAction",
    "WorkItemDirective",
    "GrammarError",
    "DirectiveGrammar",
    "DEFAULT_GRAMMAR",
    "DEFAULT_CHECKIN_NOTE_NAMES",
    "TRIM_CHARS",
    "grammar_from_dict",
    "load_grammar",
]
