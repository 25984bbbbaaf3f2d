"""Invariant tests for the Language enum."""

from movie_content.classes.languages import LANGUAGE_BY_CODE, Language


def test_language_ids_are_unique() -> None:
    """Every Language member must have a unique language_id."""
    language_ids = [language.language_id for language in Language]
    assert len(language_ids) == len(set(language_ids)), (
        "Duplicate language_id values detected in Language enum."
    )


def test_language_values_are_unique() -> None:
    """Every Language member must have a unique display value."""
    values = [language.value for language in Language]
    assert len(values) == len(set(values)), (
        "Duplicate display values detected in Language enum."
    )


def test_language_codes_are_unique_two_letter_lowercase() -> None:
    """Every Language code must be a distinct lowercase two-letter ISO 639-1 style code."""
    codes = [language.code for language in Language]
    assert len(codes) == len(set(codes)), "Duplicate codes detected in Language enum."
    for code in codes:
        assert len(code) == 2 and code.isalpha() and code.islower(), f"Bad language code {code!r}"


def test_lookup_maps_cover_every_member() -> None:
    """The code lookup should contain exactly one entry per member."""
    assert len(LANGUAGE_BY_CODE) == len(Language)
    for language in Language:
        assert LANGUAGE_BY_CODE[language.code] is language


def test_from_code_is_case_and_whitespace_tolerant() -> None:
    assert Language.from_code(" EN ") is Language.ENGLISH
    assert Language.from_code("ko") is Language.KOREAN


def test_from_code_unknown_or_empty_returns_none() -> None:
    assert Language.from_code("qq") is None
    assert Language.from_code("") is None
