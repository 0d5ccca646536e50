from __future__ import annotations

import pytest

from postal_field.core.models import Configuration
from postal_field.core.text import extract_postal_code


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12345", "12345"),
        ("1234", None),
        ("123456", None),
        ("abcde", None),
        ("12345\n", None),
        ("１２３４５", None),  # full-width digits are not ASCII
        ("", None),
    ],
)
def test_us(raw, expected):
    assert extract_postal_code(raw, Configuration.US) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("A1B1C1", "A1B1C1"),
        ("A1B 1C1", "A1B 1C1"),
        ("12345", "12345"),
        ("A1B1", None),
        ("1234567A", None),
    ],
)
def test_canada(raw, expected):
    assert extract_postal_code(raw, Configuration.CANADA) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2000", "2000"),
        ("20000", "20000"),
        ("200", None),
        ("200000", None),
    ],
)
def test_australia(raw, expected):
    assert extract_postal_code(raw, Configuration.AUSTRALIA) == expected


@pytest.mark.parametrize("raw", ["", "SW1A 1AA", "75008", "anything at all", "x" * 40])
def test_global_accepts_anything(raw):
    assert extract_postal_code(raw, Configuration.GLOBAL) == raw


def test_extract_is_repeatable():
    assert extract_postal_code("94101", Configuration.US) == extract_postal_code("94101", Configuration.US)

