#!/usr/bin/env python3
# run_booltable.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Command-line interface and interactive loop for truth table generation

import sys
import argparse
from pathlib import Path
from typing import Iterable, List

from expression.exceptions import ParseError
from table import EvaluationError, evaluate_expression
from utils.logger import configure_logging, get_logger
from utils.table_formatter import format_subexpressions, format_table, format_tree

PROMPT = ">"
QUIT_COMMANDS = {"quit", "exit"}


def read_expression_file(filepath: Path) -> List[str]:
    """Read one expression per non-blank line.

    Args:
        filepath: Path to the expression file

    Returns:
        Expressions in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file holds no expressions
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            expressions = [line.strip() for line in f if line.strip()]
    except FileNotFoundError:
        raise FileNotFoundError(f"Expression file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading expression file: {e}")

    if not expressions:
        raise ValueError("Expression file is empty")

    return expressions


def report_expression(text: str, show_tree: bool, show_subexpressions: bool) -> None:
    """Evaluate one expression and log its truth table.

    Raises:
        ParseError: Expression is malformed
        EvaluationError: Internal inconsistency while evaluating
    """
    logger = get_logger()
    truth_table = evaluate_expression(text)

    if show_tree:
        logger.info(format_tree(truth_table.tree))
        logger.info("")

    logger.info(format_table(truth_table))
    logger.info(f"-> {truth_table.result}")

    if show_subexpressions:
        logger.info("")
        logger.info(format_subexpressions(truth_table))


def describe_parse_error(text: str, error: ParseError) -> str:
    """Format a parse error with a caret under the failing position."""
    if error.position is None:
        return str(error)
    return f"{error}\n  {text}\n  {' ' * error.position}^"


def run_batch(expressions: Iterable[str], args: argparse.Namespace) -> int:
    """Evaluate expressions in order, stopping at the first failure."""
    for text in expressions:
        try:
            report_expression(text, args.tree, args.subexpressions)
        except ParseError as e:
            get_logger().error(describe_parse_error(text, e))
            return 2
        get_logger().info("")
    return 0


def run_interactive(args: argparse.Namespace) -> int:
    """Read expressions from stdin until EOF or a quit command.

    Errors are reported and the loop continues with the next line.
    """
    logger = get_logger()

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return 0

        text = line.strip()
        if not text:
            continue
        if text in QUIT_COMMANDS:
            return 0

        try:
            report_expression(text, args.tree, args.subexpressions)
        except ParseError as e:
            logger.error(describe_parse_error(text, e))
        except EvaluationError as e:
            logger.error(f"Evaluation error: {e}")
        logger.info("")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Booltable - truth tables for boolean expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_booltable.py "a+b"
  python run_booltable.py "(a+b).c" --tree
  python run_booltable.py -f expressions.txt --subexpressions
  python run_booltable.py            (interactive, one expression per line)

Syntax:
  single-character symbols [A-Za-z0-9], ! NOT, . AND, + OR, parentheses.
  Operators have no precedence and nest to the right: a+b.c is a+(b.c).
        """,
    )

    parser.add_argument(
        "expression", nargs="?", help="Expression to evaluate (omit for interactive mode)"
    )

    parser.add_argument(
        "-f", "--file", type=Path, help="Evaluate every non-blank line of a file"
    )

    parser.add_argument(
        "--tree", action="store_true", help="Print the parsed expression tree"
    )

    parser.add_argument(
        "--subexpressions",
        action="store_true",
        help="Print the column computed for every sub-expression",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the tree and every sub-expression column (implies --tree --subexpressions)",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for truth table generation.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        args.tree = args.subexpressions = True

    configure_logging(debug=args.debug)
    logger = get_logger()

    try:
        if args.expression is not None:
            return run_batch([args.expression], args)

        if args.file is not None:
            return run_batch(read_expression_file(args.file), args)

        return run_interactive(args)

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return 1

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Expression file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
