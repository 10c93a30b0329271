"""Building parse trees from token lists."""

from __future__ import annotations

from typing import Any, Iterable

from schemelet.tokenizer import Token, TokenType
from schemelet.values import NIL, Pair, SchemeSyntaxError, Symbol, iter_list, make_list


def parse(tokens: Iterable[Token]) -> Any:
    """Turn a token sequence into a list of top-level expressions.

    Parenthesised groups become nested lists; atoms become their values.
    """
    tokens = list(tokens)
    if not tokens:
        raise SchemeSyntaxError("Error (parse): null pointer")
    stack: list[list[Any]] = [[]]
    for token in tokens:
        if token.type is TokenType.OPEN:
            stack.append([])
        elif token.type is TokenType.CLOSE:
            if len(stack) == 1:
                raise SchemeSyntaxError("No matching open parenthesis.")
            items = stack.pop()
            stack[-1].append(make_list(items))
        else:
            stack[-1].append(token.value)
    if len(stack) > 1:
        raise SchemeSyntaxError("No matching close parenthesis")
    return make_list(stack[0])


def _format_atom(item: Any) -> str:
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


def format_tree(tree: Any) -> str:
    """Render a parse tree as Scheme code, each element followed by a space."""
    parts = []
    for item in iter_list(tree):
        if isinstance(item, Pair):
            parts.append("(" + format_tree(item) + ") ")
        elif item is NIL:
            parts.append("()")
        else:
            parts.append(_format_atom(item))
    return "".join(parts)