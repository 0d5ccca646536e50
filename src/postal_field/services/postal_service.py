from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from postal_field.core.models import Configuration, HintText, ShapingRule
from postal_field.core.rules import shaping_rule_for
from postal_field.core.text import extract_postal_code
from postal_field.infra.field import InMemoryFloatingLabel, InMemoryTextField
from postal_field.services.validator import DEFAULT_INVALID_MESSAGE, PostalCodeValidator


@dataclass(frozen=True)
class ValidationResult:
    configuration: Configuration
    postal_code: str | None
    message: str | None = None

    @property
    def valid(self) -> bool:
        return self.postal_code is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "configuration": self.configuration.value,
            "postal_code": self.postal_code,
            "valid": self.valid,
            "message": self.message,
        }


@dataclass(frozen=True)
class EntryResult:
    configuration: Configuration
    accepted_text: str
    postal_code: str | None
    rule: ShapingRule
    hint: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "configuration": self.configuration.value,
            "accepted_text": self.accepted_text,
            "postal_code": self.postal_code,
            "rule": self.rule.to_dict(),
            "hint": self.hint,
        }


class PostalCodeService:
    def __init__(
        self,
        *,
        hints: Mapping[HintText, str] | None = None,
        invalid_message: str = DEFAULT_INVALID_MESSAGE,
        default_configuration: Configuration = Configuration.GLOBAL,
    ) -> None:
        self._hints = dict(hints or {})
        self._invalid_message = invalid_message
        self._default_configuration = default_configuration

    def configuration_for(self, country: str | None) -> Configuration:
        """country가 비어 있으면 설정의 기본값을 사용."""
        if not (country or "").strip():
            return self._default_configuration
        return Configuration.for_country(country)

    def rule(self, country: str | None = None) -> ShapingRule:
        return shaping_rule_for(self.configuration_for(country))

    def validate(self, text: str, country: str | None = None) -> ValidationResult:
        config = self.configuration_for(country)
        postal_code = extract_postal_code(text, config)
        return ValidationResult(
            configuration=config,
            postal_code=postal_code,
            message=None if postal_code is not None else self._invalid_message,
        )

    def enter(self, keystrokes: str, country: str | None = None) -> EntryResult:
        """
        빈 필드에서 국가를 선택한 뒤 keystrokes를 한 글자씩 입력한 결과.
        입력 필터(문자 클래스/최대 길이)가 걸러낸 글자는 accepted_text에 남지 않습니다.
        """
        field = InMemoryTextField()
        label = InMemoryFloatingLabel()
        validator = PostalCodeValidator(
            field,
            label=label,
            hints=self._hints,
            error_message=self._invalid_message,
        )
        validator.set_configuration(self.configuration_for(country))
        field.type_text(keystrokes)

        return EntryResult(
            configuration=validator.configuration,
            accepted_text=field.text,
            postal_code=validator.postal_code,
            rule=validator.shaping_rule,
            hint=label.hint,
        )
