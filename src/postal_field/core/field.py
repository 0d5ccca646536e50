from __future__ import annotations

from typing import Callable, Protocol

from postal_field.core.models import CharacterClass

TextChangedListener = Callable[[str], None]


class TextInputField(Protocol):
    """호스트 텍스트 입력 위젯이 제공해야 하는 연산."""

    @property
    def text(self) -> str: ...

    def set_max_length(self, max_length: int) -> None: ...

    def set_character_class(self, character_class: CharacterClass) -> None: ...

    def set_hint(self, hint: str) -> None: ...

    def set_error_message(self, message: str) -> None: ...

    def set_error_shown(self, shown: bool) -> None: ...

    def set_autofill_hint(self, hint: str) -> None: ...

    def add_text_changed_listener(self, listener: TextChangedListener) -> None: ...


class FloatingLabel(Protocol):
    """필드를 감싸는 플로팅 라벨 (선택)."""

    @property
    def is_hint_enabled(self) -> bool: ...

    def set_hint(self, hint: str) -> None: ...
