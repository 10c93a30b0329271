"""Built-in procedures and the global frame that holds them."""

from __future__ import annotations

import operator
from typing import Any, Callable

from schemelet.values import NIL, EvaluationError, Frame, Pair, Primitive, cons


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_numbers(args: list[Any], name: str) -> None:
    for value in args:
        if not _is_number(value):
            raise EvaluationError(f"Wrong type in {name}")


def _check_count(args: list[Any], count: int, name: str) -> None:
    if len(args) != count:
        plural = "argument" if count == 1 else "arguments"
        raise EvaluationError(f"{name} expects exactly {count} {plural}")


def add(args: list[Any]) -> int | float:
    """Sum the arguments; the result is a double if any argument is one."""
    _check_numbers(args, "add")
    total = sum(args)
    if any(isinstance(value, float) for value in args):
        return float(total)
    return total


def subtract(args: list[Any]) -> int | float:
    """Return the first argument minus the sum of the rest."""
    if not args:
        raise EvaluationError("- expects at least 1 argument")
    _check_numbers(args, "subtract")
    first, *rest = args
    result = first - add(rest)
    if isinstance(first, float) or any(isinstance(value, float) for value in rest):
        return float(result)
    return result


def _compare(args: list[Any], name: str, test: Callable[[Any, Any], bool]) -> bool:
    _check_count(args, 2, name)
    left, right = args
    if not (_is_number(left) and _is_number(right)):
        raise EvaluationError(f"wrong type for {name}")
    return test(left, right)


def equal(args: list[Any]) -> bool:
    """True if the two numbers are equal, whether int or double."""
    return _compare(args, "=", operator.eq)


def less_than(args: list[Any]) -> bool:
    """True if the first number is less than the second."""
    return _compare(args, "<", operator.lt)


def greater_than(args: list[Any]) -> bool:
    """True if the first number is greater than the second."""
    return _compare(args, ">", operator.gt)


def null_p(args: list[Any]) -> bool:
    """True if the single argument is the empty list."""
    _check_count(args, 1, "null?")
    return args[0] is NIL


def make_pair(args: list[Any]) -> Pair:
    """Make a pair of the two arguments."""
    _check_count(args, 2, "cons")
    return cons(args[0], args[1])


def _single_pair(args: list[Any], name: str) -> Pair:
    _check_count(args, 1, name)
    value = args[0]
    if not isinstance(value, Pair):
        raise EvaluationError(f"{name} operation on invalid type")
    return value


def first(args: list[Any]) -> Any:
    """Return the car of the single pair argument."""
    return _single_pair(args, "car").car


def rest(args: list[Any]) -> Any:
    """Return the cdr of the single pair argument."""
    return _single_pair(args, "cdr").cdr


_GLOBALS: dict[str, Callable[[list[Any]], Any]] = {
    "+": add,
    "-": subtract,
    "<": less_than,
    ">": greater_than,
    "=": equal,
    "cons": make_pair,
    "car": first,
    "cdr": rest,
}


def global_frame() -> Frame:
    """Return a fresh top-level frame with the built-in procedures bound."""
    frame = Frame()
    for name, function in _GLOBALS.items():
        frame.define(name, Primitive(name, function))
    return frame