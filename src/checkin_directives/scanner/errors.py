"""Error types for the directive scanner.

Missing or malformed directives are never errors: the scanner treats
them as absent.  The only failures are broken calling contracts.
"""
from __future__ import annotations


class ScanPreconditionError(ValueError):
    """Raised when ``scan`` is called without usable options or output sink.

    Raised before any field of the options is touched.
    """
