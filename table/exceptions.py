# table/exceptions.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Custom exceptions for column evaluation

"""Exceptions raised while building and evaluating truth table columns.

These signal internal-consistency failures: a well-formed expression parsed
from the same text its symbols were collected from never triggers them.
They exist so that such a defect surfaces loudly instead of yielding a
silently wrong column.
"""


class EvaluationError(RuntimeError):
    """Base class for failures while computing truth table columns."""

    pass


class UnknownSymbolError(EvaluationError):
    """A leaf references a symbol that has no base column."""

    def __init__(self, symbol: str):
        super().__init__(f"No base column for symbol '{symbol}'")
        self.symbol = symbol


class ColumnError(EvaluationError):
    """A column contains something other than '0' and '1' characters."""

    pass


class ColumnLengthError(ColumnError):
    """Two columns that must line up position by position differ in length."""

    pass
