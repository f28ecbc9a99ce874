# expression/lexer.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Lexical analyzer for boolean expression tokenization using SLY

"""Lexical analyzer for boolean expression strings.

This module breaks expression text into tokens for the parser. Every
variable is a single alphanumeric character, so ``ab`` yields two SYMBOL
tokens and is later rejected by the grammar for lacking an operator.

Supported Tokens:
- Operators: ! (NOT), . (AND), + (OR)
- Grouping: (, )
- Symbols: single characters in [A-Za-z0-9]
- Whitespace: ignored during tokenization
"""

from sly import Lexer

from .exceptions import ParseError
from utils.logger import get_logger


class BoolLexer(Lexer):
    """SLY-based lexer for boolean expression tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "SYMBOL",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"!"
    AND = r"\."
    OR = r"\+"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Single-character variable; keep in sync with symbols.SYMBOL_PATTERN
    SYMBOL = r"[A-Za-z0-9]"

    def error(self, t):
        """Reject a character that matches no token pattern.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ParseError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}",
            position=error_pos,
        )
