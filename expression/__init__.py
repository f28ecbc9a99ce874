# expression/__init__.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Expression tokenization, symbol collection and parsing components

"""Boolean expression parsing for truth table generation.

This package turns a single line of boolean expression text into the pieces
the table builder and evaluator consume: the ordered set of distinct symbols
and the expression tree.

Core Functions:
    collect_symbols: Distinct single-character symbols in first-seen order
    parse: Converts expression strings into expression trees

Syntax:
    - Symbols: single characters in [A-Za-z0-9], case-sensitive
    - '!' negation, '.' AND, '+' OR
    - Parentheses for grouping; operators have no precedence and nest right

Example:
    >>> from expression import parse
    >>> str(parse("!(a+b).c"))
    '(!(a+b).c)'
"""

from .exceptions import ParseError
from .grammar import _BoolParser
from .symbols import collect_symbols
from utils.logger import get_logger


def parse(source: str):
    """Parse expression string into an expression tree.

    Uses a fresh parser instance for each invocation so that no state is
    carried from one input line to the next.

    Args:
        source: Boolean expression string to parse

    Returns:
        Root node of the expression tree

    Raises:
        ParseError: Expression is empty, malformed or contains illegal characters
        RecursionError: Never wrapped as ParseError; valid input is not malformed

    Example:
        >>> parse("a.b")
        Binary(left=Leaf(symbol='a', negated=False), operator=<Operator.AND: '.'>, right=Leaf(symbol='b', negated=False), negated=False)
    """
    logger = get_logger()

    parser = _BoolParser()

    try:
        result = parser.parse(source)
        logger.debug("Expression parsed to canonical form %s", result)
        return result

    except ParseError:
        logger.debug("ParseError encountered during expression parsing")
        raise

    except RecursionError:
        raise

    except Exception as exc:
        logger.debug("Unexpected parsing error: %s: %s", type(exc).__name__, exc)
        raise ParseError(str(exc)) from exc


__all__ = ["parse", "collect_symbols", "ParseError"]
