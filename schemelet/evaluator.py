"""Evaluation of parsed expressions: special forms and procedure application."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from schemelet.values import (
    NIL,
    UNSPECIFIED,
    VOID,
    Closure,
    EvaluationError,
    Frame,
    Pair,
    Primitive,
    Symbol,
    iter_list,
)


def evaluate(expr: Any, frame: Frame) -> Any:
    """Evaluate one expression in the given frame and return its value."""
    if isinstance(expr, Symbol):
        return frame.lookup(expr)
    if isinstance(expr, Pair):
        return _evaluate_combination(expr, frame)
    return expr


def apply_closure(function: Closure, args: Iterable[Any]) -> Any:
    """Call a user-defined procedure with already evaluated arguments."""
    values = list(args)
    if len(values) != len(function.params):
        raise EvaluationError("invalid number of arguments to function")
    local = Frame(parent=function.frame)
    for name, value in zip(function.params, values):
        local.define(name, value)
    return evaluate(function.body, local)


def apply_primitive(function: Primitive, args: Any, frame: Frame) -> Any:
    """Evaluate a list of argument expressions in frame and call a built-in."""
    return function([evaluate(arg, frame) for arg in iter_list(args)])


def _evaluate_combination(expr: Pair, frame: Frame) -> Any:
    head, args = expr.car, expr.cdr
    if not isinstance(head, Symbol):
        if not isinstance(head, Pair):
            raise EvaluationError("type")
        return _call(evaluate(head, frame), args, frame)
    form = _SPECIAL_FORMS.get(head.name)
    if form is not None:
        return form(args, frame)
    return _call(frame.lookup(head), args, frame)


def _call(function: Any, args: Any, frame: Frame) -> Any:
    if isinstance(function, Closure):
        return apply_closure(function, (evaluate(arg, frame) for arg in iter_list(args)))
    if isinstance(function, Primitive):
        return apply_primitive(function, args, frame)
    raise EvaluationError("Invalid findSymbol result type")


def _sequence(body: Iterable[Any], frame: Frame) -> Any:
    result: Any = VOID
    for expr in body:
        result = evaluate(expr, frame)
    return result


def _binding_frame(frame: Frame, name: Symbol) -> Frame:
    current: Frame | None = frame
    while current is not None:
        if name.name in current.bindings:
            return current
        current = current.parent
    raise EvaluationError(f"symbol '{name.name}' not found")


def _let_pairs(bindings: Any) -> Iterable[tuple[Symbol, Any]]:
    if bindings is NIL:
        return
    if not isinstance(bindings, Pair):
        raise EvaluationError("Invalid let pair.")
    for pair in iter_list(bindings):
        if (
            not isinstance(pair, Pair)
            or not isinstance(pair.car, Symbol)
            or not isinstance(pair.cdr, Pair)
        ):
            raise EvaluationError("Invalid let pair.")
        yield pair.car, pair.cdr.car


def _eval_if(args: Any, frame: Frame) -> Any:
    parts = list(iter_list(args))
    if not parts:
        raise EvaluationError("If not followed by a boolean")
    test = evaluate(parts[0], frame)
    if not isinstance(test, bool):
        raise EvaluationError("If not followed by a boolean")
    if len(parts) < 2:
        raise EvaluationError("If not followed by a true case")
    if len(parts) < 3:
        raise EvaluationError("If not followed by a false case")
    return evaluate(parts[1] if test else parts[2], frame)


def _eval_let(args: Any, frame: Frame) -> Any:
    parts = list(iter_list(args))
    if len(parts) < 2:
        raise EvaluationError("Wrong number of args for let")
    bindings, body = parts[0], parts[1:]
    local = Frame(parent=frame)
    for name, init in _let_pairs(bindings):
        value = evaluate(init, frame)
        if name.name in local.bindings:
            raise EvaluationError("Repeated variable in same let call.")
        local.define(name, value)
    return _sequence(body, local)


def _eval_letrec(args: Any, frame: Frame) -> Any:
    parts = list(iter_list(args))
    if len(parts) < 2:
        raise EvaluationError("Wrong number of args for let")
    bindings, body = parts[0], parts[1:]
    local = Frame(parent=frame)
    evaluated: list[tuple[Symbol, Any]] = []
    for name, init in _let_pairs(bindings):
        local.define(name, UNSPECIFIED)
        value = evaluate(init, local)
        if value is UNSPECIFIED:
            raise EvaluationError("eval called on UNSPECIFIED_TYPE")
        evaluated.append((name, value))
    for name, value in evaluated:
        local.define(name, value)
    return _sequence(body, local)


def _eval_quote(args: Any, frame: Frame) -> Any:
    parts = list(iter_list(args))
    if not parts:
        raise EvaluationError("Wrong number of args for quote")
    if len(parts) > 1:
        raise EvaluationError("Too many args for quote")
    return parts[0]


def _eval_set(args: Any, frame: Frame) -> Any:
    parts = list(iter_list(args))
    if len(parts) != 2:
        raise EvaluationError("set! expects exactly 2 arguments")
    name, expr = parts
    if not isinstance(name, Symbol):
        raise EvaluationError("1st arg should be an existing symbol")
    target = _binding_frame(frame, name)
    value = evaluate(expr, frame)
    if not (isinstance(value, (int, float, str, Pair, Closure)) or value is VOID):
        raise EvaluationError("wrong type for 2nd argument")
    target.bindings[name.name] = value
    return VOID


def _eval_begin(args: Any, frame: Frame) -> Any:
    return _sequence(iter_list(args), frame)


def _eval_define(args: Any, frame: Frame) -> Any:
    parts = list(iter_list(args))
    if len(parts) != 2:
        raise EvaluationError("Invalid number of args")
    name, expr = parts
    if not isinstance(name, Symbol):
        raise EvaluationError("Invalid type of args")
    frame.define(name, evaluate(expr, frame))
    return VOID


def _eval_lambda(args: Any, frame: Frame) -> Closure:
    parts = list(iter_list(args))
    if not parts:
        raise EvaluationError("no args following lambda")
    if len(parts) == 1:
        raise EvaluationError("only 1 arg following lambda")
    if len(parts) > 2:
        raise EvaluationError("too many args following lambda")
    params, body = parts
    if params is not NIL and not isinstance(params, Pair):
        raise EvaluationError("formal parameters for lambda must be symbols.")
    names = tuple(iter_list(params))
    if not all(isinstance(name, Symbol) for name in names):
        raise EvaluationError("formal parameters for lambda must be symbols.")
    if len({name.name for name in names}) != len(names):
        raise EvaluationError("Duplicate parameter symbols")
    return Closure(names, body, frame)


_SPECIAL_FORMS: dict[str, Callable[[Any, Frame], Any]] = {
    "if": _eval_if,
    "let": _eval_let,
    "letrec": _eval_letrec,
    "quote": _eval_quote,
    "set!": _eval_set,
    "begin": _eval_begin,
    "define": _eval_define,
    "lambda": _eval_lambda,
}