r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import abackoff


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(abackoff.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ looks like a version number."""
    assert "." in abackoff.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in abackoff.__all__:
        assert hasattr(abackoff, name), f"{name} is in __all__ but not defined in module"


def test_factories_exported() -> None:
    """Test that the iterator factories are exported."""
    for name in (
        "constant",
        "exponential",
        "constant_async",
        "exponential_async",
        "constant_durations",
        "exponential_durations",
    ):
        assert callable(getattr(abackoff, name))
