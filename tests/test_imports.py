"""Smoke tests for package import and version."""

import fairy


def test_import_package() -> None:
    assert isinstance(fairy, object)


def test_version() -> None:
    assert fairy.__version__ == "0.1.0"
