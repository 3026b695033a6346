import pytest
from datetime import datetime
from decimal import Decimal

from grids.fields import RowReader, parse_amount, parse_timestamp
from models.exceptions import FieldDecodeError, ResponseStructureError

COLUMNS = {"name": 0, "amount": 1, "date": 2}


class TestParseAmount:
    """Tests for parse_amount function."""

    def test_parse_fixed_point(self):
        assert parse_amount("total", "1234.56") == Decimal("1234.56")

    def test_preserves_precision(self):
        """Test that no binary floating point rounding creeps in."""
        amount = parse_amount("total", "0.10")
        assert amount == Decimal("0.10")
        assert str(amount) == "0.10"

    def test_parse_negative(self):
        assert parse_amount("total", "-42.00") == Decimal("-42.00")

    def test_empty_string_raises_error(self):
        with pytest.raises(FieldDecodeError) as exc_info:
            parse_amount("total", "")
        assert exc_info.value.field == "total"
        assert exc_info.value.raw == ""

    def test_garbage_raises_error(self):
        with pytest.raises(FieldDecodeError, match="total"):
            parse_amount("total", "12,50 RSD")

    def test_non_finite_raises_error(self):
        with pytest.raises(FieldDecodeError):
            parse_amount("total", "NaN")

    def test_non_string_raises_error(self):
        with pytest.raises(FieldDecodeError):
            parse_amount("total", 12.5)

    def test_surrounding_whitespace_raises_error(self):
        with pytest.raises(FieldDecodeError, match="fixed-point"):
            parse_amount("total", " 12.00\n")

    def test_underscore_separator_raises_error(self):
        with pytest.raises(FieldDecodeError, match="fixed-point"):
            parse_amount("total", "1_000.00")

    def test_exponent_raises_error(self):
        with pytest.raises(FieldDecodeError, match="fixed-point"):
            parse_amount("total", "1.5E+3")

    def test_non_ascii_digits_raise_error(self):
        with pytest.raises(FieldDecodeError):
            parse_amount("total", "\u0661\u0662.00")

    def test_bare_fraction_raises_error(self):
        with pytest.raises(FieldDecodeError):
            parse_amount("total", ".50")

    def test_explicit_plus_sign(self):
        assert parse_amount("total", "+5.25") == Decimal("5.25")


class TestParseTimestamp:
    """Tests for parse_timestamp function."""

    def test_parse_timestamp(self):
        assert parse_timestamp("date", "15.01.2024 10:00:00") == datetime(
            2024, 1, 15, 10, 0, 0
        )

    def test_iso_format_raises_error(self):
        with pytest.raises(FieldDecodeError):
            parse_timestamp("date", "2024-01-15 10:00:00")

    def test_missing_time_raises_error(self):
        with pytest.raises(FieldDecodeError):
            parse_timestamp("date", "15.01.2024")

    def test_single_digit_day_raises_error(self):
        with pytest.raises(FieldDecodeError):
            parse_timestamp("date", "5.01.2024 10:00:00")

    def test_impossible_date_raises_error(self):
        with pytest.raises(FieldDecodeError, match="date"):
            parse_timestamp("date", "31.02.2024 10:00:00")


class TestRowReader:
    """Tests for RowReader class."""

    def test_reads_all_fields(self, logger):
        reader = RowReader(["Shop", "10.00", "15.01.2024 10:00:00"], COLUMNS, "Grid", 0, logger)

        assert reader.text("name") == "Shop"
        assert reader.amount("amount") == Decimal("10.00")
        assert reader.timestamp("date") == datetime(2024, 1, 15, 10, 0, 0)
        assert reader.errors == []

    def test_failed_fields_default_and_are_collected(self, logger, caplog):
        reader = RowReader(["Shop", "oops", "yesterday"], COLUMNS, "Grid", 3, logger)

        with caplog.at_level("WARNING"):
            assert reader.amount("amount") == Decimal(0)
            assert reader.timestamp("date") is None

        assert [e.field for e in reader.errors] == ["amount", "date"]
        assert "Grid row 3" in caplog.text
        assert "'yesterday'" in caplog.text

    def test_failures_go_to_shared_list(self, logger):
        shared = []
        first = RowReader(["A", "x", "15.01.2024 10:00:00"], COLUMNS, "Grid", 0, logger, shared)
        second = RowReader(["B", "1.00", "never"], COLUMNS, "Grid", 1, logger, shared)

        first.amount("amount")
        second.timestamp("date")

        assert [(e.field, e.raw) for e in shared] == [("amount", "x"), ("date", "never")]
        assert first.errors is second.errors

    def test_short_row_raises_structure_error(self, logger):
        with pytest.raises(ResponseStructureError, match="at least 3 columns"):
            RowReader(["Shop", "10.00"], COLUMNS, "Grid", 0, logger)

    def test_non_list_row_raises_structure_error(self, logger):
        with pytest.raises(ResponseStructureError, match="expected a list"):
            RowReader({"name": "Shop"}, COLUMNS, "Grid", 0, logger)

    def test_non_string_text_raises_structure_error(self, logger):
        reader = RowReader([None, "10.00", "15.01.2024 10:00:00"], COLUMNS, "Grid", 0, logger)

        with pytest.raises(ResponseStructureError, match="name is not a string"):
            reader.text("name")
