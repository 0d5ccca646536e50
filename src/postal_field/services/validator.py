from __future__ import annotations

import logging
from typing import Callable, Mapping

from postal_field.core.field import FloatingLabel, TextInputField
from postal_field.core.models import Configuration, HintText, ShapingRule
from postal_field.core.rules import shaping_rule_for
from postal_field.core.text import extract_postal_code

log = logging.getLogger(__name__)

AUTOFILL_HINT = "postalCode"
DEFAULT_INVALID_MESSAGE = "Your ZIP is invalid."

RulesListener = Callable[[ShapingRule], None]


class PostalCodeValidator:
    """
    우편번호 입력 필드 컨트롤러.

    설정(Configuration)이 바뀌면 입력 규칙(힌트/최대 길이/문자 클래스)을 다시 계산해
    필드에 적용하고, 현재 입력값에서 우편번호를 추출합니다.
    """

    def __init__(
        self,
        field: TextInputField,
        *,
        label: FloatingLabel | None = None,
        configuration: Configuration = Configuration.GLOBAL,
        hints: Mapping[HintText, str] | None = None,
        error_message: str = DEFAULT_INVALID_MESSAGE,
    ) -> None:
        self._field = field
        self._label = label
        self._hints = dict(hints or {})
        self._configuration = configuration
        self._applied_rule: ShapingRule | None = None
        self._listeners: list[RulesListener] = []
        self._dispatching = False
        self._should_show_error = False

        field.set_error_message(error_message)
        field.set_autofill_hint(AUTOFILL_HINT)
        field.add_text_changed_listener(self._on_text_changed)

        self._apply_rule()

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @configuration.setter
    def configuration(self, value: Configuration) -> None:
        self.set_configuration(value)

    def get_configuration(self) -> Configuration:
        return self._configuration

    def set_configuration(self, configuration: Configuration) -> None:
        old = self._configuration
        self._configuration = configuration
        if old is not configuration:
            log.debug("Postal code configuration changed: %s -> %s", old.name, configuration.name)

        # 리스너 안에서 다시 호출되면 값만 바꾸고, 진행 중인 dispatch가 끝난 뒤 적용
        if self._dispatching:
            return
        self._apply_rule()

    @property
    def shaping_rule(self) -> ShapingRule:
        return shaping_rule_for(self._configuration)

    @property
    def postal_code(self) -> str | None:
        return extract_postal_code(self._field.text, self._configuration)

    def get_postal_code(self) -> str | None:
        return self.postal_code

    def hint_for(self, rule: ShapingRule) -> str:
        return self._hints.get(rule.hint_text, rule.hint_text.value)

    def add_rules_listener(self, listener: RulesListener) -> None:
        self._listeners.append(listener)

    def remove_rules_listener(self, listener: RulesListener) -> None:
        self._listeners.remove(listener)

    @property
    def should_show_error(self) -> bool:
        return self._should_show_error

    @should_show_error.setter
    def should_show_error(self, value: bool) -> None:
        self._should_show_error = value
        self._field.set_error_shown(value)

    def validate(self) -> str | None:
        """
        제출 시점 검증. 우편번호를 반환하고, 유효하지 않으면 에러 표시를 켭니다.
        """
        postal_code = self.postal_code
        if postal_code is None:
            self.should_show_error = True
        return postal_code

    def _on_text_changed(self, _text: str) -> None:
        # 사용자가 다시 입력하면 이전 에러는 숨김
        if self._should_show_error:
            self.should_show_error = False

    def _apply_rule(self) -> None:
        self._dispatching = True
        try:
            while True:
                rule = shaping_rule_for(self._configuration)
                if rule == self._applied_rule:
                    return
                self._applied_rule = rule

                self._field.set_max_length(rule.max_length)
                self._field.set_character_class(rule.character_class)
                self._update_hint(self.hint_for(rule))

                for listener in list(self._listeners):
                    listener(rule)
        finally:
            self._dispatching = False

    def _update_hint(self, hint: str) -> None:
        """
        플로팅 라벨이 있고 힌트가 켜져 있으면 라벨에, 아니면 필드 placeholder에 설정.
        """
        if self._label is not None and self._label.is_hint_enabled:
            self._label.set_hint(hint)
        else:
            self._field.set_hint(hint)
