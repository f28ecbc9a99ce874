# expression/grammar.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# LALR(1) grammar and parser for boolean expressions using SLY

"""Boolean expression grammar implementation using SLY parser generator.

This module defines the grammar rules that turn the lexer's token stream
into an expression tree. The grammar is deliberately minimal:

    expr    := operand AND expr | operand OR expr | operand
    operand := NOT operand | LPAREN expr RPAREN | SYMBOL

There is no precedence between '.' and '+'. A binary operator takes the
whole remainder of the current group as its right operand, so chains nest
to the right: ``a+b.c`` is ``a+(b.c)`` and ``a.b+c`` is ``a.(b+c)``.
Parentheses are the only way to group differently.
"""

from sly import Parser

from .lexer import BoolLexer
from .ast_nodes import Expr, Leaf, Binary, Operator
from .exceptions import ParseError
from utils.logger import get_logger


class _BoolParser(Parser):
    """SLY-based LALR(1) parser for boolean expressions.

    Instances are single-use: ``parse`` remembers the text it was given so
    that end-of-input errors can report a position.

    Attributes:
        tokens: Token types from BoolLexer
    """

    tokens = BoolLexer.tokens

    _text = ""

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete input is a single expression."""
        return p.expr

    @_("operand AND expr")
    def expr(self, p) -> Expr:
        """Conjunction; the right operand is the rest of the group."""
        return Binary(p.operand, Operator.AND, p.expr)

    @_("operand OR expr")
    def expr(self, p) -> Expr:
        """Disjunction; the right operand is the rest of the group."""
        return Binary(p.operand, Operator.OR, p.expr)

    @_("operand")
    def expr(self, p) -> Expr:
        return p.operand

    @_("NOT operand")
    def operand(self, p) -> Expr:
        """Negation toggles the flag of whatever it prefixes."""
        return p.operand.negate()

    @_("LPAREN expr RPAREN")
    def operand(self, p) -> Expr:
        """Parenthesized group."""
        return p.expr

    @_("SYMBOL")
    def operand(self, p) -> Expr:
        return Leaf(p.SYMBOL)

    def parse(self, text: str) -> Expr:
        """Parse expression text into an expression tree.

        Args:
            text: Boolean expression string to parse

        Returns:
            Root node of the parsed expression tree

        Raises:
            ParseError: If the expression is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug("Parsing expression: %r", text)

        self._text = text

        if text.strip() == "":
            raise ParseError("Input expression is empty.", position=0)

        try:
            tree = super().parse(BoolLexer().tokenize(text))

            if tree is None:
                raise ParseError(
                    "Failed to parse expression (syntax error).", position=len(text)
                )

            logger.debug("Successfully parsed expression into %s", type(tree).__name__)
            return tree

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except RecursionError:
            # Resource exhaustion on valid input is not a syntax error
            raise
        except Exception as e:
            logger.debug("Unexpected parsing error: %s", e)
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called by SLY when a token matches no grammar rule, or with None
        when the input ends in the middle of an expression.

        Raises:
            ParseError: Always raised with the offending position
        """
        if token:
            raise ParseError(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}",
                position=token.index,
            )

        raise ParseError(
            f"Syntax error: Unexpected end of expression at position {len(self._text)}",
            position=len(self._text),
        )
