from __future__ import annotations

import pytest

from postal_field.infra.field import InMemoryFloatingLabel, InMemoryTextField
from postal_field.services.validator import PostalCodeValidator


@pytest.fixture
def field() -> InMemoryTextField:
    return InMemoryTextField()


@pytest.fixture
def label() -> InMemoryFloatingLabel:
    return InMemoryFloatingLabel()


@pytest.fixture
def validator(field: InMemoryTextField, label: InMemoryFloatingLabel) -> PostalCodeValidator:
    return PostalCodeValidator(field, label=label)
