"""Unit tests for value classification and literal formatting."""

import re
from datetime import date, datetime, timedelta, timezone

import pytest

from tpbridge.lib.query.values import (
    ArrayValue,
    BoolValue,
    DateValue,
    NullValue,
    TextValue,
    classify_value,
    format_raw,
    format_value,
)


class TestClassifyValue:
    """Tests for classify_value."""

    def test_none_is_null(self):
        assert classify_value(None) == NullValue()

    def test_bool_is_bool_not_text(self):
        assert classify_value(True) == BoolValue(True)
        assert classify_value(False) == BoolValue(False)

    def test_date_and_datetime(self):
        assert classify_value(date(2024, 3, 5)) == DateValue(date(2024, 3, 5))
        assert classify_value(datetime(2024, 3, 5, 23, 30)) == DateValue(date(2024, 3, 5))

    def test_aware_datetime_uses_utc_day(self):
        """An aware datetime is reduced to its UTC calendar day."""
        est = timezone(timedelta(hours=-5))
        assert classify_value(datetime(2024, 3, 5, 23, 30, tzinfo=est)) == DateValue(date(2024, 3, 6))

    def test_list_and_tuple_are_arrays(self):
        assert classify_value([1, None]) == ArrayValue((TextValue("1"), NullValue()))
        assert classify_value(("a",)) == ArrayValue((TextValue("a"),))

    def test_fallback_is_text(self):
        """Numbers and other objects coerce to text via str()."""
        assert classify_value(42) == TextValue("42")
        assert classify_value(1.5) == TextValue("1.5")
        assert classify_value("High") == TextValue("High")

    def test_classified_value_passes_through(self):
        value = TextValue("x")
        assert classify_value(value) is value


class TestFormatValue:
    """Tests for format_value and format_raw."""

    def test_null(self):
        assert format_value(NullValue()) == "null"

    def test_bools_are_lower_case(self):
        assert format_value(BoolValue(True)) == "true"
        assert format_value(BoolValue(False)) == "false"

    def test_date_is_quoted_iso_day(self):
        assert format_value(DateValue(date(2024, 3, 5))) == "'2024-03-05'"

    def test_date_value_holding_datetime_drops_time(self):
        assert format_value(DateValue(datetime(2024, 3, 5, 12, 0))) == "'2024-03-05'"

    def test_array_formats_recursively(self):
        assert format_raw([1, "a", None, True, [False]]) == "['1','a',null,true,[false]]"

    def test_empty_array(self):
        assert format_raw([]) == "[]"

    def test_text_is_wrapped(self):
        assert format_value(TextValue("High")) == "'High'"

    def test_text_quotes_are_doubled(self):
        assert format_value(TextValue("It's")) == "'It''s'"

    def test_pre_quoted_text_is_not_double_wrapped(self):
        assert format_value(TextValue("'High'")) == "'High'"
        assert format_value(TextValue('"High"')) == "'High'"

    def test_caller_escaped_literal_is_kept(self):
        """A single-quoted literal already in query escaping renders unchanged."""
        assert format_value(TextValue("'It''s done'")) == "'It''s done'"

    def test_double_quoted_text_with_apostrophe(self):
        assert format_value(TextValue('"O\'Brien"')) == "'O''Brien'"

    def test_injection_attempt_stays_inside_literal(self):
        assert format_value(TextValue("x' or Id gt 0")) == "'x'' or Id gt 0'"

    def test_numbers_are_quoted_text(self):
        assert format_raw(42) == "'42'"

    def test_unclassified_input_raises(self):
        with pytest.raises(TypeError, match="classify_value"):
            format_value("raw string")

    @pytest.mark.parametrize("text", ["It's", "a'b'c", "x''y", "O'Brien's car"])
    def test_quote_count_doubles(self, text):
        """Every embedded quote is doubled and the literal is wrapped once."""
        rendered = format_value(TextValue(text))
        assert rendered.count("'") == 2 * text.count("'") + 2
        inner = rendered[1:-1]
        assert "'" not in re.sub("''", "", inner)
