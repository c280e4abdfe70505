#!/usr/bin/env python3
"""Example: Quickstart for checkin-directives

Minimal working example: apply a commit message's directives to
checkin options, inspect the result, then restore the options.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install checkin-directives
"""
from __future__ import annotations

import checkin_directives
from checkin_directives.options import OptionsSerializer

COMMIT_MESSAGE = """Fix the login page

Session cookies were dropped after a redirect.

git-tfs-work-item: 1234 associate
git-tfs-work-item: 5678 resolve
git-tfs-force: release branch is frozen
git-tfs-code-reviewer: Jane Doe
"""


def main() -> None:
    print(f"checkin-directives version: {checkin_directives.__version__}")

    options = checkin_directives.CheckinOptions(comment="left over from last commit")

    # Step 1: Apply directives (progress lines go to stdout)
    with checkin_directives.scan(options, COMMIT_MESSAGE):
        # Step 2: This is where the checkin would run
        print("\nOptions during checkin:")
        print(OptionsSerializer().to_yaml(options))

    # Step 3: Leaving the block restored the options
    print("Options after restore:")
    print(OptionsSerializer().to_yaml(options))


if __name__ == "__main__":
    main()
