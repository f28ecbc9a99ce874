# tests/expression_tests/test_parser_basic.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Test suite for expression tree construction

"""Test suite for basic expression parsing.

Verifies the tree shapes produced for leaves, groups and operator chains,
the parity rule for negation, and the canonical text rendering of trees.
"""

import pytest
from expression import parse
from expression.ast_nodes import Binary, Leaf, Operator
from utils.logger import get_logger

AND = Operator.AND
OR = Operator.OR


class TestParserBasic:
    """Test cases for expression tree structure."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    STRUCTURE_CASES = [
        ("a", Leaf("a")),
        ("!a", Leaf("a", negated=True)),
        ("a+b", Binary(Leaf("a"), OR, Leaf("b"))),
        ("a.b", Binary(Leaf("a"), AND, Leaf("b"))),
        ("!a.b", Binary(Leaf("a", True), AND, Leaf("b"))),
        ("(a+b).c", Binary(Binary(Leaf("a"), OR, Leaf("b")), AND, Leaf("c"))),
        ("!(c.d)", Binary(Leaf("c"), AND, Leaf("d"), negated=True)),
        (
            "!(a.b)+c",
            Binary(Binary(Leaf("a"), AND, Leaf("b"), negated=True), OR, Leaf("c")),
        ),
        (
            "a.(b+!c)",
            Binary(Leaf("a"), AND, Binary(Leaf("b"), OR, Leaf("c", True))),
        ),
        ("((a))", Leaf("a")),
        (" a + b ", Binary(Leaf("a"), OR, Leaf("b"))),
    ]

    @pytest.mark.parametrize("text, expected", STRUCTURE_CASES)
    def test_tree_structure(self, text, expected):
        tree = parse(text)
        self.logger.debug(f"Parsed {text!r} into {tree}")
        assert tree == expected

    ASSOCIATIVITY_CASES = [
        # Operators nest to the right regardless of which one comes first
        ("a+b.c", Binary(Leaf("a"), OR, Binary(Leaf("b"), AND, Leaf("c")))),
        ("a.b+c", Binary(Leaf("a"), AND, Binary(Leaf("b"), OR, Leaf("c")))),
        (
            "a+b+c+d",
            Binary(
                Leaf("a"),
                OR,
                Binary(Leaf("b"), OR, Binary(Leaf("c"), OR, Leaf("d"))),
            ),
        ),
        # Parentheses are the only way to group to the left
        ("(a+b).c", Binary(Binary(Leaf("a"), OR, Leaf("b")), AND, Leaf("c"))),
    ]

    @pytest.mark.parametrize("text, expected", ASSOCIATIVITY_CASES)
    def test_right_nested_chains(self, text, expected):
        assert parse(text) == expected

    NEGATION_CASES = [
        ("!!a", Leaf("a")),
        ("!!!a", Leaf("a", True)),
        ("!(a)", Leaf("a", True)),
        ("!(!a)", Leaf("a")),
        ("!(!(a.b))", Binary(Leaf("a"), AND, Leaf("b"))),
        # A group's negation applies to the group root only, not to nested chains
        (
            "!(a.b+c)",
            Binary(Leaf("a"), AND, Binary(Leaf("b"), OR, Leaf("c")), negated=True),
        ),
        (
            "!((a+b).!(c.d))",
            Binary(
                Binary(Leaf("a"), OR, Leaf("b")),
                AND,
                Binary(Leaf("c"), AND, Leaf("d"), negated=True),
                negated=True,
            ),
        ),
    ]

    @pytest.mark.parametrize("text, expected", NEGATION_CASES)
    def test_negation_parity(self, text, expected):
        assert parse(text) == expected

    CANONICAL_CASES = [
        ("a", "a"),
        ("!a", "!a"),
        ("a+b", "(a+b)"),
        ("!(c.d)", "!(c.d)"),
        ("(a+b).c", "((a+b).c)"),
        ("a+b.c", "(a+(b.c))"),
        ("!a.b", "(!a.b)"),
        ("((a))", "a"),
        ("!(a.b+c)", "!(a.(b+c))"),
    ]

    @pytest.mark.parametrize("text, canonical", CANONICAL_CASES)
    def test_canonical_text(self, text, canonical):
        assert str(parse(text)) == canonical

    @pytest.mark.parametrize("text", [case[0] for case in CANONICAL_CASES])
    def test_canonical_text_reparses_to_same_tree(self, text):
        """Parsing -> stringifying -> parsing preserves the tree."""
        tree = parse(text)
        assert parse(str(tree)) == tree

    def test_tree_symbols_in_first_seen_order(self):
        assert parse("b.a+!b").symbols() == ("b", "a")

    def test_nodes_are_hashable_and_structural(self):
        first = parse("(a.b)+c")
        second = parse("(a.b)+c")
        assert first == second
        assert hash(first) == hash(second)
        assert first.left == Binary(Leaf("a"), AND, Leaf("b"))

    def test_negate_returns_toggled_copy(self):
        node = Binary(Leaf("a"), OR, Leaf("b"))
        negated = node.negate()
        assert negated.negated is True
        assert node.negated is False
        assert negated.negate() == node
