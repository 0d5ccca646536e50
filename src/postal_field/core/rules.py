from __future__ import annotations

from postal_field.core.models import CharacterClass, Configuration, HintText, ShapingRule

MAX_LENGTH_US = 5
MAX_LENGTH_CANADA = 7
MAX_LENGTH_AUSTRALIA = 4
MAX_LENGTH_GLOBAL = 13

_GLOBAL_RULE = ShapingRule(
    hint_text=HintText.POSTAL_CODE,
    max_length=MAX_LENGTH_GLOBAL,
    character_class=CharacterClass.FREE_TEXT,
)

SHAPING_RULES: dict[Configuration, ShapingRule] = {
    Configuration.GLOBAL: _GLOBAL_RULE,
    Configuration.US: ShapingRule(
        hint_text=HintText.ZIP_CODE,
        max_length=MAX_LENGTH_US,
        character_class=CharacterClass.DIGITS_ONLY,
    ),
    Configuration.CANADA: ShapingRule(
        hint_text=HintText.POSTAL_CODE,
        max_length=MAX_LENGTH_CANADA,
        character_class=CharacterClass.FREE_TEXT,
    ),
    # 호주 우편번호는 4자리지만, 설정 전환 중 잘림을 막기 위해 US 길이(5)까지 허용
    Configuration.AUSTRALIA: ShapingRule(
        hint_text=HintText.POSTAL_CODE,
        max_length=max(MAX_LENGTH_AUSTRALIA, MAX_LENGTH_US),
        character_class=CharacterClass.DIGITS_ONLY,
    ),
}

_missing = set(Configuration) - set(SHAPING_RULES)
if _missing:
    raise RuntimeError(f"Shaping rules missing for: {sorted(c.name for c in _missing)}")


def shaping_rule_for(config: Configuration) -> ShapingRule:
    return SHAPING_RULES.get(config, _GLOBAL_RULE)
