# table/columns.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Bitstring column algebra

"""Operations on bitstring columns.

A column is a string of '0'/'1' characters holding one (sub-)expression's
value for every assignment row, position i being row i. Whole columns are
combined at once: the two operands are read as integers and merged with a
single bitwise operation, then formatted back to the original width.
``compute`` is the per-position truth table the column operations agree with.
"""

from typing import Union

from expression.ast_nodes import Operator
from .exceptions import ColumnError, ColumnLengthError

TRUE = "1"
FALSE = "0"

_COMPLEMENT = str.maketrans("01", "10")
_BITS = frozenset((TRUE, FALSE))


def validate_column(column: str) -> str:
    """Return ``column`` unchanged if it only holds '0'/'1' characters.

    Raises:
        ColumnError: If any other character is present
    """
    stray = set(column) - _BITS
    if stray:
        raise ColumnError(f"Column contains non-bit characters: {sorted(stray)}")
    return column


def compute(a: str, b: str, operator: Union[Operator, str]) -> str:
    """Apply ``operator`` to two single bits.

    Example:
        >>> compute("1", "0", ".")
        '0'
        >>> compute("1", "0", "+")
        '1'
    """
    op = Operator(operator)
    left = validate_column(a) == TRUE
    right = validate_column(b) == TRUE
    value = (left and right) if op is Operator.AND else (left or right)
    return TRUE if value else FALSE


def complement(column: str) -> str:
    """Swap every '0' and '1' in ``column``."""
    return validate_column(column).translate(_COMPLEMENT)


def combine(left: str, operator: Union[Operator, str], right: str) -> str:
    """Apply ``operator`` position by position across two equal-length columns.

    Raises:
        ColumnLengthError: If the columns differ in length
        ColumnError: If either column holds non-bit characters
    """
    op = Operator(operator)
    validate_column(left)
    validate_column(right)

    if len(left) != len(right):
        raise ColumnLengthError(
            f"Cannot combine columns of length {len(left)} and {len(right)}"
        )

    width = len(left)
    if width == 0:
        return ""

    a, b = int(left, 2), int(right, 2)
    value = a & b if op is Operator.AND else a | b
    return format(value, f"0{width}b")
