"""Test module for batman_aide package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import batman_aide

    # Assert
    assert batman_aide is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    import batman_aide

    assert isinstance(batman_aide.__version__, str)
    assert batman_aide.__version__ == "1.0.0"


def test_package_all_exports_resolve() -> None:
    """Test that every name in __all__ is importable from the package."""
    import batman_aide

    for name in batman_aide.__all__:
        assert hasattr(batman_aide, name), name


def test_top_level_functions_are_the_text_functions() -> None:
    """Test that top-level helpers are re-exported, not redefined."""
    import batman_aide
    from batman_aide.character import charset
    from batman_aide.text import strings

    assert batman_aide.is_blank is strings.is_blank
    assert batman_aide.index_of is strings.index_of
    assert batman_aide.length is strings.length
    assert batman_aide.to_charset is charset.to_charset
