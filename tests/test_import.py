"""Verify package imports work correctly."""


def test_import_parlex() -> None:
    """Test that parlex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import parlex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert parlex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from parlex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    import parlex

    for name in parlex.__all__:
        assert hasattr(parlex, name), name
