from __future__ import annotations

import re

from postal_field.core.models import Configuration
from postal_field.core.rules import MAX_LENGTH_AUSTRALIA, MAX_LENGTH_CANADA, MAX_LENGTH_US

ZIP_CODE_PATTERN = re.compile(r"^[0-9]{5}$")


def extract_postal_code(raw_text: str, config: Configuration) -> str | None:
    """
    현재 입력값과 설정으로 우편번호를 추출합니다. 유효하지 않으면 None.

    - US: 정확히 숫자 5자리 (US 카드는 어느 로케일에서든 지원해야 함)
    - CANADA: 길이 5~7
    - AUSTRALIA: 길이 4~5
    - 그 외(GLOBAL): 입력값 그대로
    """
    if config is Configuration.US:
        # match()의 $는 끝 개행("12345\n")도 통과시킴
        return raw_text if ZIP_CODE_PATTERN.fullmatch(raw_text) else None
    if config is Configuration.CANADA:
        return raw_text if MAX_LENGTH_US <= len(raw_text) <= MAX_LENGTH_CANADA else None
    if config is Configuration.AUSTRALIA:
        return raw_text if MAX_LENGTH_AUSTRALIA <= len(raw_text) <= MAX_LENGTH_US else None
    return raw_text
