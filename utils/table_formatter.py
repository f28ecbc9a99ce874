# utils/table_formatter.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Text rendering of truth tables and expression trees

"""Plain-text rendering for the command-line front end.

Nothing in here computes values; it only lays out what a TruthTable and its
expression tree already hold.
"""

from typing import TYPE_CHECKING, List

from expression.ast_nodes import Binary, Expr, Operator

if TYPE_CHECKING:
    from table.session import TruthTable

_OPERATOR_NAMES = {Operator.AND: "AND", Operator.OR: "OR"}


def format_table(truth_table: "TruthTable") -> str:
    """Render one row per assignment, one column per symbol plus the result.

    Example output for ``a.b``::

        a b | a.b
        ----+----
        0 0 | 0
        0 1 | 0
        1 0 | 0
        1 1 | 1
    """
    title = truth_table.expression.strip()
    left = " ".join(truth_table.symbols)
    header = f"{left} | {title}"
    rule = "-" * (len(left) + 1) + "+" + "-" * (len(title) + 1)

    lines = [header, rule]
    for _, bits, value in truth_table.rows():
        lines.append(f"{' '.join(bits)} | {value}")
    return "\n".join(lines)


def format_tree(node: Expr, indent: int = 0) -> str:
    """Render an expression tree, one node per line, children indented."""
    return "\n".join(_tree_lines(node, indent))


def _tree_lines(root: Expr, depth: int) -> List[str]:
    lines = []
    stack = [(root, depth)]
    while stack:
        node, level = stack.pop()
        pad = "  " * level
        if not isinstance(node, Binary):
            lines.append(f"{pad}{node}")
            continue

        name = _OPERATOR_NAMES[node.operator]
        label = f"NOT {name}" if node.negated else name
        lines.append(f"{pad}{label} ({node.operator})")
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))
    return lines


def format_subexpressions(truth_table: "TruthTable") -> str:
    """Render every memoized sub-expression column, aligned on the '='."""
    entries = truth_table.subexpressions
    if not entries:
        return ""
    width = max(len(text) for text in entries)
    return "\n".join(f"{text.ljust(width)} = {column}" for text, column in entries.items())
