# table/assignment.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Base columns for every assignment of the collected symbols

"""Assignment table construction.

For N symbols there are 2^N assignment rows, numbered in binary counting
order. Row i assigns to the symbol at position j the j-th bit
(most-significant first) of i written with N binary digits. Each symbol's
base column lists its value in every row, so for ``a, b``:

    row   a b
     0    0 0
     1    0 1
     2    1 0
     3    1 1

gives ``a = "0011"`` and ``b = "0101"``.

With zero symbols there is a single, empty assignment: width 1 and no
columns. Memory grows as N * 2^N characters and no upper bound on N is
enforced.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from .columns import FALSE, TRUE
from .exceptions import UnknownSymbolError


def binary_string(index: int, width: int) -> str:
    """Return ``index`` in binary, zero-padded to ``width`` digits.

    Example:
        >>> binary_string(2, 3)
        '010'
    """
    if index < 0 or index >= 2 ** width:
        raise ValueError(f"Row index {index} out of range for {width} symbols")
    return format(index, f"0{width}b") if width else ""


def symbol_column(position: int, count: int) -> str:
    """Return the base column of the symbol at ``position`` among ``count`` symbols.

    Bit ``position`` of the row index flips every ``2^(count-position-1)``
    rows, so the column is that many zeros then ones, repeated.
    """
    block = 2 ** (count - position - 1)
    return (FALSE * block + TRUE * block) * (2 ** position)


@dataclass(frozen=True)
class AssignmentTable:
    """Base columns for an ordered set of symbols.

    Attributes:
        symbols: Symbols in collection order
        columns: Base column per symbol, each of length ``width``
    """

    symbols: Tuple[str, ...]
    columns: Mapping[str, str]

    @property
    def width(self) -> int:
        """Number of assignment rows, 2^N."""
        return 2 ** len(self.symbols)

    def column(self, symbol: str) -> str:
        try:
            return self.columns[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol) from None

    def row(self, index: int) -> Dict[str, str]:
        """Decode assignment ``index`` into a symbol -> bit mapping."""
        bits = binary_string(index, len(self.symbols))
        return dict(zip(self.symbols, bits))

    def rows(self) -> Iterator[Tuple[str, ...]]:
        """Yield each row's bits in symbol order, row 0 first."""
        for index in range(self.width):
            yield tuple(self.columns[s][index] for s in self.symbols)


def build_assignments(symbols: Sequence[str]) -> AssignmentTable:
    """Build base columns for ``symbols``.

    Args:
        symbols: Distinct symbols in collection order

    Returns:
        AssignmentTable holding one column of length 2^N per symbol

    Raises:
        ValueError: If a symbol is listed twice
    """
    ordered = tuple(symbols)
    if len(set(ordered)) != len(ordered):
        raise ValueError(f"Duplicate symbols in {list(ordered)}")

    count = len(ordered)
    columns = {s: symbol_column(j, count) for j, s in enumerate(ordered)}
    return AssignmentTable(ordered, columns)
