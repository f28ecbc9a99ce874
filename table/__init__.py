# table/__init__.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Truth table construction and column evaluation components

"""Truth table construction by column-wise evaluation.

This package computes, for a parsed expression, its value under every
assignment of its symbols. Values are handled a column at a time: each
symbol and each sub-expression owns one bitstring with a bit per row.

Core Functions:
    build_assignments: Base columns for an ordered set of symbols
    evaluate: Result column of a tree against a seeded memo store
    evaluate_expression: Complete pipeline from text to TruthTable

Example:
    >>> from table import evaluate_expression
    >>> evaluate_expression("a+b").result
    '0111'
"""

from .assignment import AssignmentTable, build_assignments
from .columns import combine, complement, compute
from .evaluator import ColumnEvaluator, evaluate
from .exceptions import (
    ColumnError,
    ColumnLengthError,
    EvaluationError,
    UnknownSymbolError,
)
from .memo import MemoStore
from .session import TruthTable, evaluate_expression

__all__ = [
    "AssignmentTable",
    "build_assignments",
    "combine",
    "complement",
    "compute",
    "ColumnEvaluator",
    "evaluate",
    "MemoStore",
    "TruthTable",
    "evaluate_expression",
    "EvaluationError",
    "UnknownSymbolError",
    "ColumnError",
    "ColumnLengthError",
]
