"""Runtime values of the Scheme dialect: pairs, symbols, closures and frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator


class SchemeError(Exception):
    """Base class for every error the interpreter reports."""


class SchemeSyntaxError(SchemeError):
    """Raised when program text cannot be tokenized or parsed."""


class EvaluationError(SchemeError):
    """Raised when a well-formed program fails while being evaluated."""


class _Singleton:
    _instances: dict[type, Any] = {}

    def __new__(cls):
        if cls not in _Singleton._instances:
            _Singleton._instances[cls] = super().__new__(cls)
        return _Singleton._instances[cls]


class _Nil(_Singleton):
    def __repr__(self) -> str:
        return "()"


class _Void(_Singleton):
    def __repr__(self) -> str:
        return "#<void>"


class _Unspecified(_Singleton):
    def __repr__(self) -> str:
        return "#<unspecified>"


NIL = _Nil()
VOID = _Void()
UNSPECIFIED = _Unspecified()


@dataclass(frozen=True)
class Symbol:
    """An interned-by-value Scheme symbol."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Pair:
    """A cons cell."""

    car: Any
    cdr: Any


@dataclass(eq=False)
class Closure:
    """A user-defined procedure: parameters, body and defining frame."""

    params: tuple[Symbol, ...]
    body: Any
    frame: Frame


@dataclass(eq=False)
class Primitive:
    """A built-in procedure taking a Python list of evaluated arguments."""

    name: str
    function: Callable[[list[Any]], Any]

    def __call__(self, args: list[Any]) -> Any:
        return self.function(args)


@dataclass(eq=False)
class Frame:
    """A set of bindings with an optional enclosing frame."""

    parent: Frame | None = None
    bindings: dict[str, Any] = field(default_factory=dict)

    def lookup(self, name: str | Symbol) -> Any:
        """Return the value bound to name in this frame or an enclosing one."""
        key = str(name)
        frame: Frame | None = self
        while frame is not None:
            if key in frame.bindings:
                return frame.bindings[key]
            frame = frame.parent
        raise EvaluationError(f"symbol '{key}' not found")

    def define(self, name: str | Symbol, value: Any) -> None:
        """Bind name to value in this frame, shadowing any earlier binding."""
        self.bindings[str(name)] = value


def cons(car: Any, cdr: Any) -> Pair:
    """Make a new pair."""
    return Pair(car, cdr)


def car(value: Any) -> Any:
    """Return the first element of a pair."""
    if not isinstance(value, Pair):
        raise EvaluationError("car of a value that is not a pair")
    return value.car


def cdr(value: Any) -> Any:
    """Return the second element of a pair."""
    if not isinstance(value, Pair):
        raise EvaluationError("cdr of a value that is not a pair")
    return value.cdr


def is_null(value: Any) -> bool:
    """True if value is the empty list."""
    return value is NIL


def iter_list(value: Any) -> Iterator[Any]:
    """Yield the elements of a list, stopping at the first non-pair tail."""
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr


def length(value: Any) -> int:
    """Number of pairs in a list; 0 for the empty list and 1 for an atom."""
    if value is NIL:
        return 0
    if not isinstance(value, Pair):
        return 1
    return sum(1 for _ in iter_list(value))


def make_list(items: Iterable[Any]) -> Any:
    """Build a proper list from a Python iterable."""
    result: Any = NIL
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def reverse(value: Any) -> Any:
    """Return a new list with the elements in reverse order.

    The empty list reverses to itself and an atom is returned unchanged.
    """
    if not isinstance(value, Pair):
        return value
    result: Any = NIL
    for item in iter_list(value):
        result = Pair(item, result)
    return result


def _describe(item: Any) -> str | None:
    if isinstance(item, bool):
        return f"{'#t' if item else '#f'}:boolean"
    if isinstance(item, int):
        return f"{item}:integer"
    if isinstance(item, float):
        return f"{item:f}:double"
    if isinstance(item, Symbol):
        return f"{item.name}:symbol"
    if isinstance(item, str):
        return f'"{item}":string'
    return None


def _describe_tail(tail: Any) -> str | None:
    if isinstance(tail, bool):
        return None
    if isinstance(tail, int):
        return f"value: {tail}"
    if isinstance(tail, float):
        return f"value: {tail:f}"
    if isinstance(tail, str):
        return f'value: "{tail}"'
    return None


def display(value: Any) -> str:
    """Describe each element of a list on its own line, with its type."""
    lines = [line for line in map(_describe, iter_list(value)) if line is not None]
    tail = value
    while isinstance(tail, Pair):
        tail = tail.cdr
    tail_line = _describe_tail(tail)
    if tail_line is not None:
        lines.append(tail_line)
    return "".join(line + "\n" for line in lines)