"""Checkin options module.

Exports the mutable ``CheckinOptions`` record that directives act on and
the ``OptionsSerializer`` used to load and dump it.
"""
from __future__ import annotations

from checkin_directives.options.checkin_options import CheckinOptions
from checkin_directives.options.errors import OptionsError
from checkin_directives.options.serializer import OptionsSerializer

__all__ = [
    "CheckinOptions",
    "OptionsError",
    "OptionsSerializer",
]
