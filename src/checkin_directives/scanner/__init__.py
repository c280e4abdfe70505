"""Directive scanner module.

Exports the ``DirectiveScanner`` class and the ``scan`` convenience
function.
"""
from __future__ import annotations

from checkin_directives.scanner.errors import ScanPreconditionError
from checkin_directives.scanner.scanner import DirectiveScanner, OutputSink, scan

__all__ = [
    "DirectiveScanner",
    "OutputSink",
    "ScanPreconditionError",
    "scan",
]
