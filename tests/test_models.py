from __future__ import annotations

import pytest

from postal_field.core.errors import ConfigurationError, PostalFieldError
from postal_field.core.models import CharacterClass, Configuration


@pytest.mark.parametrize(
    ("country", "expected"),
    [
        ("US", Configuration.US),
        ("us", Configuration.US),
        (" CA ", Configuration.CANADA),
        ("AU", Configuration.AUSTRALIA),
        ("GB", Configuration.GLOBAL),
        ("", Configuration.GLOBAL),
        (None, Configuration.GLOBAL),
    ],
)
def test_for_country(country, expected):
    assert Configuration.for_country(country) is expected


@pytest.mark.parametrize("name", ["canada", "CANADA", " Canada "])
def test_parse_accepts_value_or_name(name):
    assert Configuration.parse(name) is Configuration.CANADA


def test_parse_rejects_unknown():
    with pytest.raises(ConfigurationError) as exc_info:
        Configuration.parse("germany")
    assert isinstance(exc_info.value, PostalFieldError)
    assert "germany" in str(exc_info.value)


def test_character_class_accepts():
    assert CharacterClass.DIGITS_ONLY.accepts("0")
    assert not CharacterClass.DIGITS_ONLY.accepts("a")
    assert CharacterClass.FREE_TEXT.accepts("-")
