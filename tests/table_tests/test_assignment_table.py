# tests/table_tests/test_assignment_table.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Test suite for assignment table construction

"""Test suite for base column construction.

Covers column widths, binary counting order, the round trip between row
indexes and per-symbol columns, and the zero-symbol boundary case.
"""

import pytest
from table import build_assignments, UnknownSymbolError
from table.assignment import binary_string, symbol_column


class TestAssignmentTable:
    """Test cases for building base columns."""

    @pytest.mark.parametrize("count", range(0, 7))
    def test_width_and_column_lengths(self, count):
        symbols = [chr(ord("a") + i) for i in range(count)]
        assignments = build_assignments(symbols)

        assert assignments.width == 2 ** count
        assert len(list(assignments.rows())) == 2 ** count
        assert set(assignments.columns) == set(symbols)
        for symbol in symbols:
            assert len(assignments.column(symbol)) == 2 ** count

    def test_two_symbol_columns(self, two_symbol_table):
        assert two_symbol_table.symbols == ("a", "b")
        assert two_symbol_table.column("a") == "0011"
        assert two_symbol_table.column("b") == "0101"

    def test_three_symbol_columns(self, three_symbol_table):
        assert three_symbol_table.column("a") == "00001111"
        assert three_symbol_table.column("b") == "00110011"
        assert three_symbol_table.column("c") == "01010101"

    def test_rows_in_binary_counting_order(self, two_symbol_table):
        assert list(two_symbol_table.rows()) == [
            ("0", "0"),
            ("0", "1"),
            ("1", "0"),
            ("1", "1"),
        ]

    @pytest.mark.parametrize("count", [1, 2, 3, 5])
    def test_row_index_round_trip(self, count):
        """Decoding a row index agrees with every symbol's column at that index."""
        symbols = [str(i) for i in range(count)]
        assignments = build_assignments(symbols)

        for index in range(assignments.width):
            decoded = assignments.row(index)
            for symbol in symbols:
                assert decoded[symbol] == assignments.column(symbol)[index]

    def test_collection_order_is_kept(self):
        assignments = build_assignments(["z", "a"])
        assert assignments.symbols == ("z", "a")
        assert assignments.column("z") == "0011"
        assert assignments.column("a") == "0101"

    def test_zero_symbols(self):
        """No symbols means one empty assignment and no columns."""
        assignments = build_assignments([])

        assert assignments.width == 1
        assert dict(assignments.columns) == {}
        assert assignments.row(0) == {}
        assert list(assignments.rows()) == [()]

    def test_duplicate_symbols_rejected(self):
        with pytest.raises(ValueError):
            build_assignments(["a", "b", "a"])

    def test_unknown_symbol_column(self, two_symbol_table):
        with pytest.raises(UnknownSymbolError) as exc_info:
            two_symbol_table.column("c")
        assert exc_info.value.symbol == "c"

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_row_index_out_of_range(self, two_symbol_table, index):
        with pytest.raises(ValueError):
            two_symbol_table.row(index)


class TestBinaryHelpers:
    """Test cases for the binary expansion helpers."""

    BINARY_CASES = [
        (0, 1, "0"),
        (1, 1, "1"),
        (2, 3, "010"),
        (5, 3, "101"),
        (1, 4, "0001"),
        (0, 0, ""),
    ]

    @pytest.mark.parametrize("index, width, expected", BINARY_CASES)
    def test_binary_string(self, index, width, expected):
        assert binary_string(index, width) == expected

    def test_symbol_column_matches_row_expansion(self):
        count = 4
        for position in range(count):
            expected = "".join(
                binary_string(i, count)[position] for i in range(2 ** count)
            )
            assert symbol_column(position, count) == expected
