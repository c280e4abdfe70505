"""Test that the quickstart API works for checkin-directives."""
from __future__ import annotations

import io


def test_quickstart_version(package_name: str, expected_version: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    assert module.__version__ == expected_version


def test_quickstart_scan_import() -> None:
    import checkin_directives

    assert callable(checkin_directives.scan)
    assert checkin_directives.CheckinOptions is not None
    assert checkin_directives.UndoHandle is not None


def test_quickstart_scan_and_revert() -> None:
    import checkin_directives

    options = checkin_directives.CheckinOptions()
    out = io.StringIO()
    handle = checkin_directives.scan(
        options,
        "Fix login\n\ngit-tfs-work-item: 1234 associate\ngit-tfs-force: hotfix",
        writer=out,
    )
    assert options.comment == "Fix login"
    assert options.work_items_to_associate == ["1234"]
    assert options.force is True
    assert out.getvalue() == "Associating with work item 1234\nForcing the checkin: hotfix\n"

    handle.revert()
    assert options == checkin_directives.CheckinOptions()


def test_quickstart_scan_defaults_to_stdout(capsys) -> None:
    import checkin_directives

    options = checkin_directives.CheckinOptions()
    with checkin_directives.scan(options, "git-tfs-work-item: 9 resolve"):
        assert options.work_items_to_resolve == ["9"]
    assert capsys.readouterr().out == "Resolving work item 9\n"
    assert options.work_items_to_resolve == []
