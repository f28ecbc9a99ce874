# expression/exceptions.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Custom exceptions for expression tokenization and parsing

"""Domain-specific exceptions for boolean expression processing.

This module defines the exception raised while tokenizing and parsing
boolean expressions. The error carries the character offset at which the
problem was detected so that callers can point the user at it.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails due to syntax errors.

    Indicates that the input does not conform to the expression grammar:
    illegal characters, empty input, unbalanced parentheses, dangling
    operators or operands without an operator between them.

    Attributes:
        position: 0-based character offset of the failure, ``len(text)``
            when the input ended unexpectedly, or None if unknown
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position
