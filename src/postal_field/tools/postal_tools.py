from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from postal_field.app.container import Container
from postal_field.core.errors import ValidationError


class CountryArgs(BaseModel):
    country: str | None = Field(
        None, max_length=8, description="ISO 3166-1 alpha-2 국가 코드 (예: US, CA, AU). 비우면 기본 설정"
    )


class ValidatePostalCodeArgs(CountryArgs):
    text: str = Field(..., max_length=64, description="우편번호 입력 필드의 현재 텍스트")


class SimulateEntryArgs(CountryArgs):
    keystrokes: str = Field(..., max_length=64, description="한 글자씩 입력할 문자열")


def _parse(model: type[BaseModel], **kwargs: Any) -> Any:
    try:
        return model.model_validate(kwargs)
    except PydanticValidationError as e:
        raise ValidationError(str(e)) from e


def register_postal_tools(mcp: FastMCP, container: Container) -> None:
    postal_service = container.postal_service

    @mcp.tool(
        name="get_postal_code_rule",
        description=(
            "국가 코드에 맞는 우편번호 입력 규칙(힌트, 최대 길이, 숫자 전용 여부)을 반환합니다. "
            "US/CA/AU 외의 국가는 전역(global) 규칙을 사용합니다."
        ),
    )
    def get_postal_code_rule(country: str | None = None) -> dict[str, Any]:
        args = _parse(CountryArgs, country=country)
        config = postal_service.configuration_for(args.country)
        return {
            "configuration": config.value,
            "rule": postal_service.rule(args.country).to_dict(),
        }

    @mcp.tool(
        name="validate_postal_code",
        description=(
            "입력된 우편번호 텍스트를 국가 설정으로 검증합니다. "
            "유효하면 postal_code에 값이, 아니면 null과 에러 메시지가 담깁니다."
        ),
    )
    def validate_postal_code(text: str, country: str | None = None) -> dict[str, Any]:
        args = _parse(ValidatePostalCodeArgs, text=text, country=country)
        return postal_service.validate(args.text, args.country).to_dict()

    @mcp.tool(
        name="simulate_postal_code_entry",
        description=(
            "빈 우편번호 필드에 국가를 선택한 뒤 글자를 하나씩 입력했을 때 "
            "입력 필터를 통과한 텍스트와 추출된 우편번호를 반환합니다."
        ),
    )
    def simulate_postal_code_entry(keystrokes: str, country: str | None = None) -> dict[str, Any]:
        args = _parse(SimulateEntryArgs, keystrokes=keystrokes, country=country)
        return postal_service.enter(args.keystrokes, args.country).to_dict()
