# table/evaluator.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Column-at-a-time evaluation of expression trees

"""Evaluates an expression tree against every assignment at once.

Instead of walking the tree once per truth table row, each node is visited
once and produces its whole column. Leaves read their symbol's base column
from the memo store, complementing it when negated. Binary nodes combine
their children's columns with one bitwise operation and complement the
result when the node is negated. Every visited node's column is recorded in
the memo store, and a node already present there is not recomputed.

The walk is post-order over an explicit stack, since right-nested chains
make trees as deep as the input is long.
"""

from __future__ import annotations

from expression import ast_nodes as ast
from .columns import combine, complement
from .exceptions import UnknownSymbolError
from .memo import MemoStore
from utils.logger import get_logger


class ColumnEvaluator(ast.Visitor):
    """Computes result columns for expression trees.

    Attributes:
        _memo: Store seeded with base columns; receives every computed column
    """

    def __init__(self, memo: MemoStore):
        self._memo = memo

    def evaluate(self, root: ast.Expr) -> str:
        """Return the column of ``root``, the truth table's result column.

        Raises:
            UnknownSymbolError: A leaf references a symbol without base column
            ColumnLengthError: Columns of different width were combined
        """
        logger = get_logger()
        result = self._visit(root)
        logger.result_ready(root, result)
        return result

    def _visit(self, root: ast.Expr) -> str:
        logger = get_logger()
        stack = [root]

        while stack:
            node = stack[-1]
            if node in self._memo:
                logger.memo_hit(node)
                stack.pop()
                continue

            if isinstance(node, ast.Binary):
                # Right pushed first so the left operand is computed first
                pending = [c for c in (node.right, node.left) if c not in self._memo]
                if pending:
                    stack.extend(pending)
                    continue

            column = node.accept(self)
            self._memo.record(node, column)
            logger.column_computed(node, column)
            stack.pop()

        return self._memo.get(root)

    def visit_leaf(self, n: ast.Leaf) -> str:
        base = self._memo.get(ast.Leaf(n.symbol))
        if base is None:
            raise UnknownSymbolError(n.symbol)

        return complement(base) if n.negated else base

    def visit_binary(self, n: ast.Binary) -> str:
        # Both operands are in the store by the time a node is visited
        left = self._memo.get(n.left)
        right = self._memo.get(n.right)
        raw = combine(left, n.operator, right)

        if not n.negated:
            return raw

        # Keep the un-negated group too, e.g. (a.b) alongside !(a.b)
        self._memo.record(n.negate(), raw)
        return complement(raw)


def evaluate(root: ast.Expr, memo: MemoStore) -> str:
    """Evaluate ``root`` against a seeded memo store."""
    return ColumnEvaluator(memo).evaluate(root)
