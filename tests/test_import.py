"""Verify package imports work correctly."""


def test_import_marklex() -> None:
    """Test that marklex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import marklex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert marklex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from marklex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Everything in __all__ resolves."""
    import marklex

    for name in marklex.__all__:
        assert hasattr(marklex, name), name


def test_tokenize_shortcut() -> None:
    from marklex import tokenize

    assert tokenize("hello world") == ("hello", " ", "world")
