from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from postal_field.core.models import Configuration, HintText

load_dotenv()


@dataclass
class Settings:
    # Field defaults
    default_configuration: Configuration
    hint_postal_code: str
    hint_zip_code: str
    invalid_message: str

    # Logging
    log_level: str
    log_format: str

    # MCP server
    mcp_host: str
    mcp_port: int
    mcp_path: str

    @property
    def hints(self) -> dict[HintText, str]:
        return {
            HintText.POSTAL_CODE: self.hint_postal_code,
            HintText.ZIP_CODE: self.hint_zip_code,
        }


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _int(name: str, default: int) -> int:
    v = _clean(os.getenv(name, str(default)))
    return int(v)


def _default_configuration() -> Configuration:
    """
    - POSTAL_DEFAULT_CONFIGURATION이 있으면 그걸 사용 (잘못된 값이면 ConfigurationError)
    - 없으면 POSTAL_DEFAULT_COUNTRY 국가 코드로 결정 (모르는 국가는 GLOBAL)
    """
    explicit = _clean(os.getenv("POSTAL_DEFAULT_CONFIGURATION"))
    if explicit:
        return Configuration.parse(explicit)
    return Configuration.for_country(_clean(os.getenv("POSTAL_DEFAULT_COUNTRY")))


def get_settings() -> Settings:
    return Settings(
        # field
        default_configuration=_default_configuration(),
        hint_postal_code=_clean(os.getenv("POSTAL_HINT_POSTAL_CODE", "Postal code")),
        hint_zip_code=_clean(os.getenv("POSTAL_HINT_ZIP_CODE", "ZIP code")),
        invalid_message=_clean(os.getenv("POSTAL_INVALID_MESSAGE", "Your ZIP is invalid.")),
        # logging
        log_level=_clean(os.getenv("LOG_LEVEL", "INFO")),
        log_format=_clean(os.getenv("LOG_FORMAT", "standard")),
        # server
        mcp_host=_clean(os.getenv("MCP_HOST", "127.0.0.1")),
        mcp_port=_int("MCP_PORT", 3334),
        mcp_path=_clean(os.getenv("MCP_PATH", "/mcp")),
    )
