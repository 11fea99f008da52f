"""Render expression trees as text, the way configuration front ends show them."""

from __future__ import annotations

from typing import Iterator, Optional

from .expr import Expr, ExprType, Symbol, SymbolType

Token = tuple[Optional[Symbol], str]

# For each node kind, the kinds of enclosing context that bind more loosely.
_LOOSER = {
    ExprType.EQUAL: (ExprType.NOT, ExprType.AND, ExprType.OR, ExprType.LIST, ExprType.NONE),
    ExprType.UNEQUAL: (ExprType.NOT, ExprType.AND, ExprType.OR, ExprType.LIST, ExprType.NONE),
    ExprType.NOT: (ExprType.AND, ExprType.OR, ExprType.LIST, ExprType.NONE),
    ExprType.AND: (ExprType.OR, ExprType.LIST, ExprType.NONE),
    ExprType.OR: (ExprType.LIST, ExprType.NONE),
    ExprType.LIST: (ExprType.NONE,),
}


def compare_type(t1: ExprType, t2: ExprType) -> int:
    """Compare the binding of two node kinds.

    Returns 0 when they are equal, 1 when ``t1`` binds tighter than ``t2``
    and -1 otherwise.
    """
    if t1 == t2:
        return 0
    return 1 if t2 in _LOOSER.get(t1, ()) else -1


def _left_name(sym: Symbol) -> Token:
    if sym.name:
        return sym, sym.name
    return None, "<choice>"


def _tokens(e: Optional[Expr], prev: ExprType) -> Iterator[Token]:
    if e is None:
        yield None, "y"
        return
    parens = compare_type(prev, e.kind) > 0
    if parens:
        yield None, "("
    kind = e.kind
    if kind == ExprType.SYMBOL:
        yield _left_name(e.left)
    elif kind == ExprType.NOT:
        yield None, "!"
        yield from _tokens(e.left, ExprType.NOT)
    elif kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        yield _left_name(e.left)
        yield None, "=" if kind == ExprType.EQUAL else "!="
        yield e.right, e.right.name or ""
    elif kind == ExprType.OR:
        yield from _tokens(e.left, ExprType.OR)
        yield None, " || "
        yield from _tokens(e.right, ExprType.OR)
    elif kind == ExprType.AND:
        yield from _tokens(e.left, ExprType.AND)
        yield None, " && "
        yield from _tokens(e.right, ExprType.AND)
    elif kind == ExprType.LIST:
        yield e.right, e.right.name or ""
        if e.left is not None:
            yield None, " ^ "
            yield from _tokens(e.left, ExprType.LIST)
    elif kind == ExprType.RANGE:
        yield None, "["
        yield e.left, e.left.name or ""
        yield None, " "
        yield e.right, e.right.name or ""
        yield None, "]"
    else:
        yield None, f"<unknown type {int(kind)}>"
    if parens:
        yield None, ")"


def expr_to_str(e: Optional[Expr]) -> str:
    """Return the plain text form of an expression; a missing one reads ``y``."""
    return "".join(text for _, text in _tokens(e, ExprType.NONE))


def expr_to_wrapped_str(e: Optional[Expr], max_width: int) -> str:
    """Return the text form with each symbol's current value shown as ``[=v]``.

    When ``max_width`` is positive, a backslash-newline is inserted before a
    token that would make the current line longer than ``max_width``.
    """
    out = ""
    for sym, text in _tokens(e, ExprType.NONE):
        sym_str = sym.string_value if sym is not None else None
        if max_width:
            extra = len(text)
            if sym_str is not None:
                extra += 4 + len(sym_str)
            last_cr = out.rfind("\n")
            last_line = len(out) - last_cr if last_cr >= 0 else len(out)
            if last_line + extra > max_width:
                out += "\\\n"
        out += text
        if sym is not None and sym.type != SymbolType.UNKNOWN:
            out += f" [={sym_str}]"
    return out