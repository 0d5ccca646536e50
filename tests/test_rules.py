from __future__ import annotations

import pytest

from postal_field.core.models import CharacterClass, Configuration, HintText
from postal_field.core.rules import SHAPING_RULES, shaping_rule_for


@pytest.mark.parametrize(
    ("config", "hint", "max_length", "character_class"),
    [
        (Configuration.GLOBAL, HintText.POSTAL_CODE, 13, CharacterClass.FREE_TEXT),
        (Configuration.US, HintText.ZIP_CODE, 5, CharacterClass.DIGITS_ONLY),
        (Configuration.CANADA, HintText.POSTAL_CODE, 7, CharacterClass.FREE_TEXT),
        (Configuration.AUSTRALIA, HintText.POSTAL_CODE, 5, CharacterClass.DIGITS_ONLY),
    ],
)
def test_rule_table(config, hint, max_length, character_class):
    rule = shaping_rule_for(config)
    assert rule.hint_text is hint
    assert rule.max_length == max_length
    assert rule.character_class is character_class


def test_every_configuration_has_a_rule():
    assert set(SHAPING_RULES) == set(Configuration)


def test_rule_is_deterministic():
    for config in Configuration:
        assert shaping_rule_for(config) == shaping_rule_for(config)


def test_unknown_value_falls_back_to_global():
    assert shaping_rule_for("mars") == shaping_rule_for(Configuration.GLOBAL)  # type: ignore[arg-type]


def test_rule_to_dict():
    assert shaping_rule_for(Configuration.US).to_dict() == {
        "hint_text": "ZIP code",
        "max_length": 5,
        "character_class": "digits_only",
    }


def test_rule_accepts():
    us = shaping_rule_for(Configuration.US)
    canada = shaping_rule_for(Configuration.CANADA)
    assert us.accepts("7")
    assert not us.accepts("A")
    assert not us.accepts("-")
    assert canada.accepts("A")
    assert canada.accepts(" ")
