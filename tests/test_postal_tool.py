from __future__ import annotations

import pytest

from postal_field.core.errors import ValidationError
from postal_field.tools.postal_tools import SimulateEntryArgs, ValidatePostalCodeArgs, _parse


def test_import_server():
    import postal_field.server  # noqa: F401


def test_parse_tool_args():
    args = _parse(ValidatePostalCodeArgs, text="94101", country="US")
    assert args.text == "94101"
    assert args.country == "US"


def test_parse_tool_args_rejects_oversized_input():
    with pytest.raises(ValidationError):
        _parse(SimulateEntryArgs, keystrokes="9" * 100, country="US")
