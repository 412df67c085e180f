"""Tests for the profile questionnaire helpers."""

import pytest

from fitplan.clients.manual import parse_number
from fitplan.clients.manual.client import _number_validator


class TestParseNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [("75", 75.0), (" 62.5 ", 62.5), ("", None), ("abc", None), (None, None)],
    )
    def test_parse(self, value, expected):
        assert parse_number(value) == expected

    def test_bounds(self):
        assert parse_number("30", 30, 120) == 30
        assert parse_number("120", 30, 120) == 120
        assert parse_number("29", 30, 120) is None
        assert parse_number("121", 30, 120) is None

    def test_validator_messages(self):
        validate = _number_validator(30, 120)

        assert validate("60") is True
        assert validate("10") == "Enter a number between 30 and 120"
