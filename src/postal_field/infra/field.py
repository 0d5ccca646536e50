from __future__ import annotations

from postal_field.core.field import TextChangedListener
from postal_field.core.models import CharacterClass
from postal_field.core.rules import MAX_LENGTH_GLOBAL


class InMemoryTextField:
    """
    화면 없이 동작하는 텍스트 입력 필드.
    - 글자 단위 입력 시 문자 클래스 필터 + 길이 제한을 적용 (실제 위젯의 입력 필터와 동일)
    - 테스트와 MCP 입력 시뮬레이션에서 사용
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._max_length = MAX_LENGTH_GLOBAL
        self._character_class = CharacterClass.FREE_TEXT
        self._listeners: list[TextChangedListener] = []

        self.hint: str | None = None
        self.error_message: str | None = None
        self.error_shown = False
        self.autofill_hint: str | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def character_class(self) -> CharacterClass:
        return self._character_class

    def set_max_length(self, max_length: int) -> None:
        self._max_length = max_length
        if len(self._text) > max_length:
            self._replace(self._text[:max_length])

    def set_character_class(self, character_class: CharacterClass) -> None:
        # 키 리스너 교체와 같음: 이미 입력된 텍스트는 다시 거르지 않음
        self._character_class = character_class

    def set_hint(self, hint: str) -> None:
        self.hint = hint

    def set_error_message(self, message: str) -> None:
        self.error_message = message

    def set_error_shown(self, shown: bool) -> None:
        self.error_shown = shown

    def set_autofill_hint(self, hint: str) -> None:
        self.autofill_hint = hint

    def add_text_changed_listener(self, listener: TextChangedListener) -> None:
        self._listeners.append(listener)

    def type_text(self, keystrokes: str) -> str:
        for ch in keystrokes:
            if len(self._text) >= self._max_length or not self._character_class.accepts(ch):
                continue
            self._replace(self._text + ch)
        return self._text

    def set_text(self, text: str) -> str:
        filtered = "".join(ch for ch in text if self._character_class.accepts(ch))
        self._replace(filtered[: self._max_length])
        return self._text

    def clear(self) -> None:
        self._replace("")

    def _replace(self, text: str) -> None:
        self._text = text
        for listener in list(self._listeners):
            listener(text)


class InMemoryFloatingLabel:
    def __init__(self, *, hint_enabled: bool = True) -> None:
        self._hint_enabled = hint_enabled
        self.hint: str | None = None

    @property
    def is_hint_enabled(self) -> bool:
        return self._hint_enabled

    def set_hint_enabled(self, enabled: bool) -> None:
        self._hint_enabled = enabled

    def set_hint(self, hint: str) -> None:
        self.hint = hint
