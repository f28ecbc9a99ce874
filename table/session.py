# table/session.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# One complete truth table evaluation per input line

"""Evaluation sessions: one input line in, one truth table out.

Every call builds its symbols, base columns, tree and memo store from
scratch, so nothing computed for one line can leak into the next.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Mapping, Tuple

from expression import collect_symbols, parse
from expression.ast_nodes import Expr
from .assignment import AssignmentTable, build_assignments
from .evaluator import ColumnEvaluator
from .memo import MemoStore
from utils.logger import get_logger


@dataclass(frozen=True)
class TruthTable:
    """Everything the presentation layer needs to render a truth table.

    Attributes:
        expression: Input text as given
        assignments: Symbols and their base columns
        tree: Parsed expression tree
        result: Result column, one bit per assignment row
        subexpressions: Canonical text -> column for every evaluated node
    """

    expression: str
    assignments: AssignmentTable
    tree: Expr
    result: str
    subexpressions: Mapping[str, str]

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self.assignments.symbols

    @property
    def width(self) -> int:
        return self.assignments.width

    def rows(self) -> Iterator[Tuple[int, Tuple[str, ...], str]]:
        """Yield ``(index, symbol bits, result bit)`` for every row in order."""
        for index, bits in enumerate(self.assignments.rows()):
            yield index, bits, self.result[index]


def evaluate_expression(text: str) -> TruthTable:
    """Build the complete truth table for one expression.

    Args:
        text: One line of expression text

    Returns:
        TruthTable for the expression

    Raises:
        ParseError: The expression is empty or malformed. Input without symbols
            always fails the grammar, which requires at least one SYMBOL
        EvaluationError: Internal inconsistency while computing columns
    """
    logger = get_logger()
    logger.expression_received(text)

    symbols = collect_symbols(text)

    assignments = build_assignments(symbols)
    logger.symbols_collected(symbols, assignments.width)

    tree = parse(text)

    memo = MemoStore.seeded(assignments)
    result = ColumnEvaluator(memo).evaluate(tree)

    return TruthTable(
        expression=text,
        assignments=assignments,
        tree=tree,
        result=result,
        subexpressions=memo.by_text(),
    )
