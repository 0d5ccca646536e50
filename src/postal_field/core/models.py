from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from postal_field.core.errors import ConfigurationError


class Configuration(str, Enum):
    GLOBAL = "global"
    US = "us"
    CANADA = "canada"
    AUSTRALIA = "australia"

    @classmethod
    def for_country(cls, country_code: str | None) -> Configuration:
        """
        국가 코드(ISO 3166-1 alpha-2) → 필드 설정.
        모르는 국가는 입력을 과하게 제한하지 않도록 GLOBAL로 취급.
        """
        code = (country_code or "").strip().upper()
        return _COUNTRY_CONFIGURATIONS.get(code, cls.GLOBAL)

    @classmethod
    def parse(cls, name: str) -> Configuration:
        raw = (name or "").strip().lower()
        for config in cls:
            if raw in (config.value, config.name.lower()):
                return config
        raise ConfigurationError(f"Unknown postal code configuration: {name!r}")


_COUNTRY_CONFIGURATIONS: dict[str, Configuration] = {
    "US": Configuration.US,
    "CA": Configuration.CANADA,
    "AU": Configuration.AUSTRALIA,
}


class CharacterClass(str, Enum):
    DIGITS_ONLY = "digits_only"
    FREE_TEXT = "free_text"  # postal address text: letters, digits, spaces, hyphens

    def accepts(self, char: str) -> bool:
        if self is CharacterClass.DIGITS_ONLY:
            return char in "0123456789"
        return True


class HintText(str, Enum):
    POSTAL_CODE = "postal code"
    ZIP_CODE = "ZIP code"


@dataclass(frozen=True)
class ShapingRule:
    hint_text: HintText
    max_length: int
    character_class: CharacterClass

    def accepts(self, char: str) -> bool:
        return self.character_class.accepts(char)

    def to_dict(self) -> dict[str, Any]:
        return {
            "hint_text": self.hint_text.value,
            "max_length": self.max_length,
            "character_class": self.character_class.value,
        }
