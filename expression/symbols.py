# expression/symbols.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Symbol collection over raw expression text

"""Collects the distinct variable symbols of an expression.

A symbol is a single ASCII letter or digit. Everything else (operators,
parentheses, whitespace, stray characters) is ignored here; rejecting
malformed input is the parser's job.
"""

import re
from typing import Tuple

SYMBOL_PATTERN = r"[A-Za-z0-9]"

_SYMBOL_RE = re.compile(SYMBOL_PATTERN)


def collect_symbols(text: str) -> Tuple[str, ...]:
    """Return the distinct symbols of ``text`` in first-appearance order.

    Symbols are case-sensitive, so ``a`` and ``A`` are two variables.

    Example:
        >>> collect_symbols("(b+a).!b")
        ('b', 'a')
    """
    return tuple(dict.fromkeys(m.group() for m in _SYMBOL_RE.finditer(text)))
