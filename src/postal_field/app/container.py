from __future__ import annotations

from dataclasses import dataclass

from postal_field.app.settings import Settings, get_settings
from postal_field.services.postal_service import PostalCodeService


@dataclass(frozen=True)
class Container:
    settings: Settings
    postal_service: PostalCodeService


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()

    postal_service = PostalCodeService(
        hints=settings.hints,
        invalid_message=settings.invalid_message,
        default_configuration=settings.default_configuration,
    )

    return Container(settings=settings, postal_service=postal_service)
