"""CLI package.

The ``cli`` sub-package contains the Click application used to preview
what a commit message's directives would do to a checkin.
"""
from __future__ import annotations
