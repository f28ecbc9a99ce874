# table/memo.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Per-evaluation store of computed sub-expression columns

"""Memo store mapping sub-expressions to their columns.

Entries are keyed by the frozen tree node itself, so two sub-trees share an
entry exactly when they are structurally equal. The canonical text of a node
is only a view over the store, used for display and lookup by text.

A store belongs to one evaluation run: it is seeded with the base column of
every symbol, filled as the evaluator visits nodes and discarded afterwards.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple

from expression.ast_nodes import Expr, Leaf, canonical_text
from .assignment import AssignmentTable
from .exceptions import ColumnLengthError


class MemoStore:
    """Columns computed during one evaluation run.

    Attributes:
        width: Length every stored column must have
    """

    def __init__(self, width: int):
        self.width = width
        self._columns: Dict[Expr, str] = {}

    @classmethod
    def seeded(cls, table: AssignmentTable) -> MemoStore:
        """Create a store holding the base column of each symbol in ``table``."""
        store = cls(table.width)
        for symbol in table.symbols:
            store.record(Leaf(symbol), table.columns[symbol])
        return store

    def record(self, node: Expr, column: str) -> str:
        """Store ``column`` for ``node`` and return it.

        Raises:
            ColumnLengthError: If the column does not span every assignment row
        """
        if len(column) != self.width:
            raise ColumnLengthError(
                f"Column for {node} has length {len(column)}, expected {self.width}"
            )
        self._columns[node] = column
        return column

    def get(self, node: Expr) -> Optional[str]:
        return self._columns.get(node)

    def lookup(self, text: str) -> Optional[str]:
        """Find a column by the canonical text of its sub-expression."""
        texts: Dict[Expr, str] = {}
        for node, column in self._columns.items():
            if canonical_text(node, texts) == text:
                return column
        return None

    def by_text(self) -> Dict[str, str]:
        """Canonical text -> column, in the order entries were recorded."""
        texts: Dict[Expr, str] = {}
        return {
            canonical_text(node, texts): column for node, column in self._columns.items()
        }

    def items(self) -> Iterator[Tuple[Expr, str]]:
        return iter(self._columns.items())

    def __contains__(self, node: object) -> bool:
        return node in self._columns

    def __len__(self) -> int:
        return len(self._columns)
