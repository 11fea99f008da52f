"""Rewriting and simplification of configuration expressions.

The rewrites work in place on the trees they are given, the way the
configuration tools reshape dependency expressions before showing or
evaluating them. Callers that need the original should pass a copy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .expr import (
    SYMBOL_CONST,
    SYMBOL_MOD,
    SYMBOL_NO,
    SYMBOL_YES,
    Expr,
    ExprType,
    Symbol,
    SymbolType,
    and_expr,
    binary_expr,
    comparison_expr,
    eliminate_yn,
    expr_eq,
    is_no,
    is_yes,
    symbol_expr,
    unary_expr,
)

log = logging.getLogger(__name__)

_NO_RECURSE = (
    ExprType.EQUAL,
    ExprType.UNEQUAL,
    ExprType.SYMBOL,
    ExprType.LIST,
    ExprType.RANGE,
)
_SIMPLE = (ExprType.EQUAL, ExprType.UNEQUAL, ExprType.SYMBOL, ExprType.NOT)


def _become_symbol(e: Expr, sym: Symbol) -> Expr:
    e.kind = ExprType.SYMBOL
    e.left = sym
    e.right = None
    return e


def _become_not(e: Expr, sym: Symbol) -> Expr:
    e.kind = ExprType.NOT
    e.left = symbol_expr(sym)
    e.right = None
    return e


def _transform_compare(e: Expr) -> Expr:
    if e.left.type != SymbolType.BOOLEAN:
        return e
    equal = e.kind == ExprType.EQUAL
    if e.right is SYMBOL_NO:
        return _become_not(e, e.left) if equal else _become_symbol(e, e.left)
    if e.right is SYMBOL_MOD:
        forced = "n" if equal else "y"
        log.warning(
            "boolean symbol %s tested for 'm'? test forced to '%s'",
            e.left.name,
            forced,
        )
        return _become_symbol(e, SYMBOL_NO if equal else SYMBOL_YES)
    if e.right is SYMBOL_YES:
        return _become_symbol(e, e.left) if equal else _become_not(e, e.left)
    return e


_NEGATED_LITERAL = {id(SYMBOL_YES): SYMBOL_NO, id(SYMBOL_MOD): SYMBOL_MOD, id(SYMBOL_NO): SYMBOL_YES}


def _transform_not(e: Expr) -> Expr:
    child = e.left
    if child.kind == ExprType.NOT:
        # !!a -> a
        return transform(child.left)
    if child.kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        # !a='x' -> a!='x'
        child.kind = ExprType.UNEQUAL if child.kind == ExprType.EQUAL else ExprType.EQUAL
        return child
    if child.kind in (ExprType.OR, ExprType.AND):
        # De Morgan: !(a || b) -> !a && !b, !(a && b) -> !a || !b
        e.kind = ExprType.AND if child.kind == ExprType.OR else ExprType.OR
        e.right = unary_expr(ExprType.NOT, child.right)
        child.kind = ExprType.NOT
        child.right = None
        return transform(e)
    if child.kind == ExprType.SYMBOL:
        negated = _NEGATED_LITERAL.get(id(child.left))
        if negated is not None and child.left in (SYMBOL_YES, SYMBOL_MOD, SYMBOL_NO):
            return _become_symbol(child, negated)
    return e


def transform(e: Optional[Expr]) -> Optional[Expr]:
    """Bring an expression into a normal form of symbols, negations, AND and OR."""
    if e is None:
        return None
    if e.kind not in _NO_RECURSE:
        e.left = transform(e.left)
        e.right = transform(e.right)
    if e.kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        return _transform_compare(e)
    if e.kind == ExprType.NOT:
        return _transform_not(e)
    return e


def _extract(
    kind: ExprType, common: Optional[Expr], e1: Expr, e2: Expr
) -> tuple[Optional[Expr], Expr, Expr]:
    if e1.kind == kind:
        common, e1.left, e2 = _extract(kind, common, e1.left, e2)
        common, e1.right, e2 = _extract(kind, common, e1.right, e2)
        return common, e1, e2
    if e2.kind == kind:
        common, e1, e2.left = _extract(kind, common, e1, e2.left)
        common, e1, e2.right = _extract(kind, common, e1, e2.right)
        return common, e1, e2
    if expr_eq(e1, e2):
        common = binary_expr(kind, common, e1) if common is not None else e1
        if kind == ExprType.AND:
            e1, e2 = symbol_expr(SYMBOL_YES), symbol_expr(SYMBOL_YES)
        elif kind == ExprType.OR:
            e1, e2 = symbol_expr(SYMBOL_NO), symbol_expr(SYMBOL_NO)
    return common, e1, e2


def extract_eq(
    kind: ExprType, e1: Expr, e2: Expr
) -> tuple[Optional[Expr], Expr, Expr]:
    """Pull the terms two expressions share out of both.

    Returns the shared terms joined by ``kind`` (or ``None``) and the two
    rewritten expressions, in which each shared term became a neutral literal.
    """
    return _extract(kind, None, e1, e2)


def _extract_simplified(
    kind: ExprType, e1: Expr, e2: Expr
) -> tuple[Optional[Expr], Expr, Expr]:
    common, e1, e2 = extract_eq(kind, e1, e2)
    if common is not None:
        e1 = eliminate_yn(e1)
        e2 = eliminate_yn(e2)
    return common, e1, e2


def extract_eq_and(e1: Expr, e2: Expr) -> tuple[Optional[Expr], Expr, Expr]:
    """Pull shared AND terms out of two expressions and fold the leftovers."""
    return _extract_simplified(ExprType.AND, e1, e2)


def extract_eq_or(e1: Expr, e2: Expr) -> tuple[Optional[Expr], Expr, Expr]:
    """Pull shared OR terms out of two expressions and fold the leftovers."""
    return _extract_simplified(ExprType.OR, e1, e2)


def _rights(e1: Expr, e2: Expr, a: Symbol, b: Symbol) -> bool:
    return (e1.right is a and e2.right is b) or (e1.right is b and e2.right is a)


def _operand_symbols(e1: Expr, e2: Expr) -> Optional[Symbol]:
    """Return the symbol both simple terms test, or None if they cannot be joined."""
    if e1.kind not in _SIMPLE or e2.kind not in _SIMPLE:
        return None
    if e1.kind == ExprType.NOT:
        inner = e1.left
        if inner.kind not in (ExprType.EQUAL, ExprType.UNEQUAL, ExprType.SYMBOL):
            return None
        sym1 = inner.left
    else:
        sym1 = e1.left
    if e2.kind == ExprType.NOT:
        if e2.left.kind != ExprType.SYMBOL:
            return None
        sym2 = e2.left.left
    else:
        sym2 = e2.left
    if sym1 is not sym2:
        return None
    if sym1.type not in (SymbolType.BOOLEAN, SymbolType.TRISTATE):
        return None
    return sym1


def _join_or(e1: Expr, e2: Expr) -> Optional[Expr]:
    if expr_eq(e1, e2):
        return e1.copy()
    sym = _operand_symbols(e1, e2)
    if sym is None:
        return None
    if sym.type == SymbolType.TRISTATE and e1.kind == e2.kind == ExprType.EQUAL:
        if _rights(e1, e2, SYMBOL_YES, SYMBOL_MOD):
            return comparison_expr(ExprType.UNEQUAL, sym, SYMBOL_NO)
        if _rights(e1, e2, SYMBOL_YES, SYMBOL_NO):
            return comparison_expr(ExprType.UNEQUAL, sym, SYMBOL_MOD)
        if _rights(e1, e2, SYMBOL_MOD, SYMBOL_NO):
            return comparison_expr(ExprType.UNEQUAL, sym, SYMBOL_YES)
    if sym.type == SymbolType.BOOLEAN:
        if (
            e1.kind == ExprType.NOT
            and e1.left.kind == ExprType.SYMBOL
            and e2.kind == ExprType.SYMBOL
        ) or (
            e2.kind == ExprType.NOT
            and e2.left.kind == ExprType.SYMBOL
            and e1.kind == ExprType.SYMBOL
        ):
            return symbol_expr(SYMBOL_YES)
    return None


def _symbol_with(e1: Expr, e2: Expr, kind: ExprType, value: Symbol) -> bool:
    return (
        e1.kind == ExprType.SYMBOL and e2.kind == kind and e2.right is value
    ) or (e2.kind == ExprType.SYMBOL and e1.kind == kind and e1.right is value)


def _join_and(e1: Expr, e2: Expr) -> Optional[Expr]:
    if expr_eq(e1, e2):
        return e1.copy()
    sym = _operand_symbols(e1, e2)
    if sym is None:
        return None
    if _symbol_with(e1, e2, ExprType.EQUAL, SYMBOL_YES):
        # (a) && (a='y') -> (a='y')
        return comparison_expr(ExprType.EQUAL, sym, SYMBOL_YES)
    if _symbol_with(e1, e2, ExprType.UNEQUAL, SYMBOL_NO):
        # (a) && (a!='n') -> (a)
        return symbol_expr(sym)
    if _symbol_with(e1, e2, ExprType.UNEQUAL, SYMBOL_MOD):
        # (a) && (a!='m') -> (a='y')
        return comparison_expr(ExprType.EQUAL, sym, SYMBOL_YES)
    if sym.type != SymbolType.TRISTATE:
        return None
    for eq, neq in ((e1, e2), (e2, e1)):
        if eq.kind == ExprType.EQUAL and neq.kind == ExprType.UNEQUAL:
            # (a='b') && (a!='c') -> 'b'='c' ? 'n' : a='b'
            value = eq.right
            if (neq.right.flags & SYMBOL_CONST) and (value.flags & SYMBOL_CONST):
                if value is not neq.right:
                    return comparison_expr(ExprType.EQUAL, sym, value)
                return symbol_expr(SYMBOL_NO)
    if e1.kind == e2.kind == ExprType.UNEQUAL:
        if _rights(e1, e2, SYMBOL_YES, SYMBOL_NO):
            return comparison_expr(ExprType.EQUAL, sym, SYMBOL_MOD)
        if _rights(e1, e2, SYMBOL_YES, SYMBOL_MOD):
            return comparison_expr(ExprType.EQUAL, sym, SYMBOL_NO)
        if _rights(e1, e2, SYMBOL_MOD, SYMBOL_NO):
            return comparison_expr(ExprType.EQUAL, sym, SYMBOL_YES)
    return None


class _Holder:
    """Owns the root of a tree so that it can be replaced through a slot."""

    def __init__(self, value: Expr) -> None:
        self.value = value


@dataclass
class _Slot:
    """A place in a tree that holds an expression: an attribute of its owner."""

    owner: object
    attr: str

    def get(self) -> Expr:
        return getattr(self.owner, self.attr)

    def set(self, value: Expr) -> None:
        setattr(self.owner, self.attr, value)


@dataclass
class _Counter:
    changes: int = 0


def _dups1(kind: ExprType, s1: _Slot, s2: _Slot, counter: _Counter) -> None:
    if s1.get().kind == kind:
        _dups1(kind, _Slot(s1.get(), "left"), s2, counter)
        _dups1(kind, _Slot(s1.get(), "right"), s2, counter)
        return
    if s2.get().kind == kind:
        _dups1(kind, s1, _Slot(s2.get(), "left"), counter)
        _dups1(kind, s1, _Slot(s2.get(), "right"), counter)
        return
    if s1.get() is s2.get():
        return
    if s1.get().kind in (ExprType.OR, ExprType.AND):
        _dups1(s1.get().kind, s1, s1, counter)
    if kind == ExprType.OR:
        joined = _join_or(s1.get(), s2.get())
        neutral = SYMBOL_NO
    elif kind == ExprType.AND:
        joined = _join_and(s1.get(), s2.get())
        neutral = SYMBOL_YES
    else:
        return
    if joined is not None:
        s1.set(symbol_expr(neutral))
        s2.set(joined)
        counter.changes += 1


def _dups2(kind: ExprType, s1: _Slot, s2: _Slot, counter: _Counter) -> None:
    if s1.get().kind == kind:
        _dups2(kind, _Slot(s1.get(), "left"), s2, counter)
        _dups2(kind, _Slot(s1.get(), "right"), s2, counter)
        return
    if s2.get().kind == kind:
        _dups2(kind, s1, _Slot(s2.get(), "left"), counter)
        _dups2(kind, s1, _Slot(s2.get(), "right"), counter)
    if s1.get() is s2.get():
        return
    e1 = s1.get()
    if e1.kind == ExprType.OR:
        _dups2(e1.kind, s1, s1, counter)
        # (FOO || BAR) && (!FOO && !BAR) -> n
        negated = transform(unary_expr(ExprType.NOT, s1.get().copy()))
        _, rest, _ = extract_eq_and(negated, s2.get().copy())
        if is_yes(rest):
            s1.set(symbol_expr(SYMBOL_NO))
            counter.changes += 1
    elif e1.kind == ExprType.AND:
        _dups2(e1.kind, s1, s1, counter)
        # (FOO && BAR) || (!FOO || !BAR) -> y
        negated = transform(unary_expr(ExprType.NOT, s1.get().copy()))
        _, rest, _ = extract_eq_or(negated, s2.get().copy())
        if is_no(rest):
            s1.set(symbol_expr(SYMBOL_YES))
            counter.changes += 1


def eliminate_dups(e: Optional[Expr]) -> Optional[Expr]:
    """Merge redundant and contradicting terms of an AND/OR expression until stable."""
    if e is None:
        return e
    while True:
        counter = _Counter()
        if e.kind in (ExprType.OR, ExprType.AND):
            root = _Holder(e)
            slot = _Slot(root, "value")
            _dups1(slot.get().kind, slot, slot, counter)
            _dups2(slot.get().kind, slot, slot, counter)
            e = root.value
        if not counter.changes:
            return e
        e = eliminate_yn(e)


def trans_compare(e: Optional[Expr], kind: ExprType, sym: Symbol) -> Optional[Expr]:
    """Rewrite the test ``e = sym`` (or ``e != sym``) into an expression on symbols.

    ``kind`` is ``ExprType.EQUAL`` or ``ExprType.UNEQUAL``; a missing ``e``
    stands for the literal y.
    """
    if e is None:
        result = symbol_expr(sym)
        if kind == ExprType.UNEQUAL:
            result = unary_expr(ExprType.NOT, result)
        return result
    if e.kind in (ExprType.AND, ExprType.OR):
        left = trans_compare(e.left, ExprType.EQUAL, sym)
        right = trans_compare(e.right, ExprType.EQUAL, sym)
        flipped = ExprType.OR if e.kind == ExprType.AND else ExprType.AND
        result = e
        if sym is SYMBOL_YES:
            result = binary_expr(e.kind, left, right)
        if sym is SYMBOL_NO:
            result = binary_expr(flipped, left, right)
        if kind == ExprType.UNEQUAL:
            result = unary_expr(ExprType.NOT, result)
        return result
    if e.kind == ExprType.NOT:
        other = ExprType.UNEQUAL if kind == ExprType.EQUAL else ExprType.EQUAL
        return trans_compare(e.left, other, sym)
    if e.kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        equal = kind == ExprType.EQUAL
        if sym is SYMBOL_YES:
            return e.copy() if equal else unary_expr(ExprType.NOT, e.copy())
        if sym is SYMBOL_MOD:
            return symbol_expr(SYMBOL_NO if equal else SYMBOL_YES)
        if sym is SYMBOL_NO:
            return unary_expr(ExprType.NOT, e.copy()) if equal else e.copy()
        return None
    if e.kind == ExprType.SYMBOL:
        return comparison_expr(kind, e.left, sym)
    return None


def _leftmost_symbol(e: Optional[Expr]) -> Optional[Expr]:
    if e is None:
        return None
    while e.kind != ExprType.SYMBOL:
        e = e.left
    return e.copy()


def simplify_unmet_dep(e1: Expr, e2: Optional[Expr]) -> Optional[Expr]:
    """Return the leading symbol of the longest part of ``e1`` that ``e2`` does not cover."""
    if e1.kind == ExprType.OR:
        return and_expr(
            simplify_unmet_dep(e1.left, e2),
            simplify_unmet_dep(e1.right, e2),
        )
    if e1.kind == ExprType.AND:
        joined = and_expr(e1.copy(), e2.copy() if e2 is not None else None)
        joined = eliminate_dups(joined)
        found = e1 if not expr_eq(joined, e1) else None
    else:
        found = e1
    return _leftmost_symbol(found)