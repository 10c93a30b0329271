"""Running whole programs: evaluate every top-level form and render the results."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable

from schemelet.evaluator import evaluate
from schemelet.parser import parse
from schemelet.primitives import global_frame
from schemelet.tokenizer import tokenize
from schemelet.values import (
    NIL,
    VOID,
    Closure,
    EvaluationError,
    Pair,
    SchemeError,
    SchemeSyntaxError,
    Symbol,
    iter_list,
)


def interpret(tree: Any) -> list[Any]:
    """Evaluate each top-level expression of a parse tree in one global frame.

    Returns the values in program order.
    """
    frame = global_frame()
    return [evaluate(expr, frame) for expr in iter_list(tree)]


def _format_atom(item: Any) -> str:
    if item is VOID:
        return ""
    if isinstance(item, Closure):
        return "#<procedure>"
    if isinstance(item, bool):
        return "#t " if item else "#f "
    if isinstance(item, int):
        return f"{item} "
    if isinstance(item, float):
        return f"{item:f} "
    if isinstance(item, Symbol):
        return f"{item.name} "
    if isinstance(item, str):
        return f'"{item}" '
    return ""


def _format_item(item: Any) -> str:
    if isinstance(item, Pair):
        return "(" + _format_list(item) + ") "
    if item is NIL:
        return "() "
    return _format_atom(item)


def _format_list(value: Any) -> str:
    parts = [_format_item(item) for item in iter_list(value)]
    tail = value
    while isinstance(tail, Pair):
        tail = tail.cdr
    if tail is not NIL:
        parts.append(". " + _format_atom(tail))
    return "".join(parts)


def format_results(results: Iterable[Any]) -> str:
    """Render evaluated values on one line, each followed by a space."""
    return "".join(_format_item(item) for item in results) + "\n"


def run(text: str) -> str:
    """Tokenize, parse and evaluate program text, returning the printed output."""
    return format_results(interpret(parse(tokenize(text))))


def _error_message(error: SchemeError) -> str:
    if isinstance(error, SchemeSyntaxError):
        return f"Syntax error: {error}"
    if isinstance(error, EvaluationError):
        return f"Evaluation error: {error}"
    return str(error)


def main(argv: list[str] | None = None) -> int:
    """Run a program read from a file, or from standard input when none is given."""
    parser = argparse.ArgumentParser(
        prog="schemelet", description="Evaluate a small Scheme program."
    )
    parser.add_argument("file", nargs="?", help="program file (default: standard input)")
    options = parser.parse_args(argv)
    if options.file is None:
        text = sys.stdin.read()
    else:
        with open(options.file, encoding="utf-8") as handle:
            text = handle.read()
    try:
        output = run(text)
    except SchemeError as error:
        print(_error_message(error))
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())