# expression/ast_nodes.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Expression tree node classes for boolean expression representation

"""Expression tree node classes for parsed boolean expressions.

This module defines the immutable and hashable nodes of an expression tree.
Leaves reference a single symbol and may be negated; internal nodes combine
two sub-trees with AND or OR and may have their result negated, which is how
a prefixed group such as ``!(a.b)`` is represented.

Node Types:
    Leaf: A (possibly negated) variable reference
    Binary: AND/OR of two sub-trees with an optional result negation

Negation composes by parity: each ``!`` toggles the ``negated`` flag of the
operand it prefixes, so ``!!a`` is the plain leaf ``a`` and ``!(!(a.b))`` is
the plain node ``(a.b)``. A node's flag never propagates into its children.

``str(node)`` yields the canonical, fully parenthesized text of a node
(``a``, ``!a``, ``(a.b)``, ``!((a+b).c)``), which is also valid input syntax.

Right-nested operator chains make trees as deep as the input is long, so
hashing, equality and rendering never recurse: each node caches its hash
when built, and walks use an explicit stack.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterator, Optional, Protocol, Tuple


class Operator(Enum):
    """Binary connectives, valued by their input syntax."""

    AND = "."
    OR = "+"

    def __str__(self) -> str:
        return self.value


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern."""

    def visit_leaf(self, n: Leaf): ...

    def visit_binary(self, n: Binary): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Concrete nodes implement ``accept`` for visitor dispatch. Canonical text,
    symbol listing and structural equality are shared, stack-based walks.
    """

    def accept(self, v: Visitor):
        raise NotImplementedError

    def negate(self) -> Expr:
        """Return a copy of this node with its negation flag toggled."""
        return replace(self, negated=not self.negated)

    def symbols(self) -> Tuple[str, ...]:
        """Referenced symbols in first-seen (left to right) order."""
        return tuple(dict.fromkeys(n.symbol for n in walk(self) if isinstance(n, Leaf)))

    def __str__(self) -> str:
        return canonical_text(self)


@dataclass(frozen=True, slots=True)
class Leaf(Expr):
    """Reference to one variable, optionally complemented.

    Attributes:
        symbol: Single-character variable name
        negated: True when the leaf was written as ``!symbol``
    """

    symbol: str
    negated: bool = False
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_hash", hash((Leaf, self.symbol, self.negated)))

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_leaf method."""
        return v.visit_leaf(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return self._hash


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """AND/OR combination of two sub-trees.

    Attributes:
        left: Left operand
        operator: Connective applied position by position
        right: Right operand
        negated: True when the whole result is complemented, as in ``!(a+b)``
    """

    left: Expr
    operator: Operator
    right: Expr
    negated: bool = False
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "_hash",
            hash((Binary, self.left._hash, self.operator, self.right._hash, self.negated)),
        )

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_binary method."""
        return v.visit_binary(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return self._hash


def walk(root: Expr) -> Iterator[Expr]:
    """Yield every node of ``root`` in pre-order, left before right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Binary):
            stack.append(node.right)
            stack.append(node.left)


def structurally_equal(first: Expr, second: Expr) -> bool:
    """True when both trees have the same shape, symbols, operators and flags."""
    pairs = [(first, second)]
    while pairs:
        a, b = pairs.pop()
        if a is b:
            continue
        if type(a) is not type(b) or a._hash != b._hash or a.negated != b.negated:
            return False
        if isinstance(a, Leaf):
            if a.symbol != b.symbol:
                return False
            continue
        if a.operator is not b.operator:
            return False
        pairs.append((a.left, b.left))
        pairs.append((a.right, b.right))
    return True


def canonical_text(root: Expr, cache: Optional[Dict[Expr, str]] = None) -> str:
    """Render ``root`` fully parenthesized, children before parents.

    Args:
        root: Node to render
        cache: Optional node -> text mapping shared across calls, so that
            rendering every node of one tree costs a single pass
    """
    texts = {} if cache is None else cache
    stack = [root]
    while stack:
        node = stack[-1]
        if node in texts:
            stack.pop()
            continue

        if isinstance(node, Binary):
            pending = [c for c in (node.right, node.left) if c not in texts]
            if pending:
                stack.extend(pending)
                continue
            text = f"({texts[node.left]}{node.operator}{texts[node.right]})"
        else:
            text = node.symbol

        texts[node] = f"!{text}" if node.negated else text
        stack.pop()
    return texts[root]
