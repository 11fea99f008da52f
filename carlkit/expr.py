"""Configuration symbols and the boolean expressions that tie them together.

Expressions are trees of ``Expr`` nodes. Depending on the node kind, the
``left`` and ``right`` operands hold further expressions or symbols.
Symbols are compared by identity, so the shared ``SYMBOL_YES``,
``SYMBOL_MOD`` and ``SYMBOL_NO`` constants stand for the literal values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

SYMBOL_CONST = 0x0001
SYMBOL_CHECK = 0x0008
SYMBOL_CHOICE = 0x0010
SYMBOL_CHOICEVAL = 0x0020
SYMBOL_VALID = 0x0080
SYMBOL_OPTIONAL = 0x0100
SYMBOL_WRITE = 0x0200
SYMBOL_CHANGED = 0x0400
SYMBOL_AUTO = 0x1000
SYMBOL_CHECKED = 0x2000
SYMBOL_WARNED = 0x8000
SYMBOL_DEF = 0x10000
SYMBOL_DEF_USER = 0x10000
SYMBOL_DEF_AUTO = 0x20000
SYMBOL_DEF3 = 0x40000
SYMBOL_DEF4 = 0x80000

SYMBOL_MAXLENGTH = 256


class Tristate(IntEnum):
    """The three values a boolean or tristate option can take."""

    NO = 0
    MOD = 1
    YES = 2


class SymbolType(IntEnum):
    """The declared type of a configuration symbol."""

    UNKNOWN = 0
    BOOLEAN = 1
    TRISTATE = 2
    INT = 3
    HEX = 4
    STRING = 5
    OTHER = 6


class ExprType(IntEnum):
    """The kind of an expression node."""

    NONE = 0
    OR = 1
    AND = 2
    NOT = 3
    EQUAL = 4
    UNEQUAL = 5
    LIST = 6
    SYMBOL = 7
    RANGE = 8


_TRI_CHARS = {Tristate.NO: "n", Tristate.MOD: "m", Tristate.YES: "y"}


@dataclass(eq=False)
class Symbol:
    """A configuration symbol with its current value.

    ``tri`` is the current tristate value; ``value`` is the current text
    value for non-boolean symbols and for string constants.
    """

    name: Optional[str]
    type: SymbolType = SymbolType.UNKNOWN
    tri: Tristate = Tristate.NO
    value: str = ""
    flags: int = 0

    @property
    def string_value(self) -> str:
        """The current value as it appears in a configuration file."""
        if self.type in (SymbolType.BOOLEAN, SymbolType.TRISTATE):
            return _TRI_CHARS[Tristate(self.tri)]
        return self.value


SYMBOL_YES = Symbol("y", SymbolType.TRISTATE, Tristate.YES, "y", SYMBOL_CONST | SYMBOL_VALID)
SYMBOL_MOD = Symbol("m", SymbolType.TRISTATE, Tristate.MOD, "m", SYMBOL_CONST | SYMBOL_VALID)
SYMBOL_NO = Symbol("n", SymbolType.TRISTATE, Tristate.NO, "n", SYMBOL_CONST | SYMBOL_VALID)

Operand = Union["Expr", Symbol, None]


@dataclass(eq=False)
class Expr:
    """One node of an expression tree."""

    kind: ExprType
    left: Operand = None
    right: Operand = None

    def copy(self) -> Expr:
        """Return a deep copy of the tree; symbols are shared, not copied."""
        return Expr(self.kind, _copy_operand(self.left), _copy_operand(self.right))


def _copy_operand(operand: Operand) -> Operand:
    return operand.copy() if isinstance(operand, Expr) else operand


def _assign(target: Expr, source: Expr) -> Expr:
    target.kind = source.kind
    target.left = source.left
    target.right = source.right
    return target


def tri_or(a: Tristate, b: Tristate) -> Tristate:
    """Tristate disjunction: the larger of the two values."""
    return Tristate(max(a, b))


def tri_and(a: Tristate, b: Tristate) -> Tristate:
    """Tristate conjunction: the smaller of the two values."""
    return Tristate(min(a, b))


def tri_not(a: Tristate) -> Tristate:
    """Tristate negation: y and n swap, m stays m."""
    return Tristate(2 - a)


def symbol_expr(sym: Symbol) -> Expr:
    """Return an expression that stands for one symbol."""
    return Expr(ExprType.SYMBOL, sym)


def unary_expr(kind: ExprType, child: Optional[Expr]) -> Expr:
    """Return a node with a single child expression."""
    return Expr(kind, child)


def binary_expr(kind: ExprType, left: Optional[Expr], right: Optional[Expr]) -> Expr:
    """Return a node joining two child expressions."""
    return Expr(kind, left, right)


def comparison_expr(kind: ExprType, left: Symbol, right: Symbol) -> Expr:
    """Return a node comparing two symbols."""
    return Expr(kind, left, right)


def and_expr(e1: Optional[Expr], e2: Optional[Expr]) -> Optional[Expr]:
    """Join two expressions with AND, where a missing one means no condition."""
    if e1 is None:
        return e2
    return binary_expr(ExprType.AND, e1, e2) if e2 is not None else e1


def or_expr(e1: Optional[Expr], e2: Optional[Expr]) -> Optional[Expr]:
    """Join two expressions with OR, where a missing one is left out."""
    if e1 is None:
        return e2
    return binary_expr(ExprType.OR, e1, e2) if e2 is not None else e1


def _eliminate_eq_in(kind: ExprType, e1: Expr, e2: Expr) -> tuple[Expr, Expr]:
    if e1.kind == kind:
        e1.left, e2 = _eliminate_eq_in(kind, e1.left, e2)
        e1.right, e2 = _eliminate_eq_in(kind, e1.right, e2)
        return e1, e2
    if e2.kind == kind:
        e1, e2.left = _eliminate_eq_in(kind, e1, e2.left)
        e1, e2.right = _eliminate_eq_in(kind, e1, e2.right)
        return e1, e2
    if (
        e1.kind == ExprType.SYMBOL
        and e2.kind == ExprType.SYMBOL
        and e1.left is e2.left
        and (e1.left is SYMBOL_YES or e1.left is SYMBOL_NO)
    ):
        return e1, e2
    if not expr_eq(e1, e2):
        return e1, e2
    if kind == ExprType.OR:
        return symbol_expr(SYMBOL_NO), symbol_expr(SYMBOL_NO)
    if kind == ExprType.AND:
        return symbol_expr(SYMBOL_YES), symbol_expr(SYMBOL_YES)
    return e1, e2


def eliminate_eq(
    e1: Optional[Expr], e2: Optional[Expr]
) -> tuple[Optional[Expr], Optional[Expr]]:
    """Remove the terms two AND/OR expressions share and return both remainders."""
    if e1 is None or e2 is None:
        return e1, e2
    if e1.kind in (ExprType.OR, ExprType.AND):
        e1, e2 = _eliminate_eq_in(e1.kind, e1, e2)
    if e1.kind != e2.kind and e2.kind in (ExprType.OR, ExprType.AND):
        e1, e2 = _eliminate_eq_in(e2.kind, e1, e2)
    return eliminate_yn(e1), eliminate_yn(e2)


def expr_eq(e1: Expr, e2: Expr) -> bool:
    """Tell whether two expressions are equal, ignoring the order of AND/OR terms."""
    if e1.kind != e2.kind:
        return False
    if e1.kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        return e1.left is e2.left and e1.right is e2.right
    if e1.kind == ExprType.SYMBOL:
        return e1.left is e2.left
    if e1.kind == ExprType.NOT:
        return expr_eq(e1.left, e2.left)
    if e1.kind in (ExprType.AND, ExprType.OR):
        c1, c2 = eliminate_eq(e1.copy(), e2.copy())
        return (
            c1.kind == ExprType.SYMBOL
            and c2.kind == ExprType.SYMBOL
            and c1.left is c2.left
        )
    return False


def _is_sym(e: Expr, sym: Symbol) -> bool:
    return e.kind == ExprType.SYMBOL and e.left is sym


def _collapse(e: Expr, sym: Symbol) -> Expr:
    e.kind = ExprType.SYMBOL
    e.left = sym
    e.right = None
    return e


def eliminate_yn(e: Optional[Expr]) -> Optional[Expr]:
    """Fold literal y and n operands out of AND and OR nodes, in place."""
    if e is None:
        return e
    if e.kind == ExprType.AND:
        e.left = eliminate_yn(e.left)
        e.right = eliminate_yn(e.right)
        if _is_sym(e.left, SYMBOL_NO) or _is_sym(e.right, SYMBOL_NO):
            if _is_sym(e.left, SYMBOL_NO) or not _is_sym(e.left, SYMBOL_YES):
                return _collapse(e, SYMBOL_NO)
        if _is_sym(e.left, SYMBOL_YES):
            return _assign(e, e.right)
        if _is_sym(e.right, SYMBOL_NO):
            return _collapse(e, SYMBOL_NO)
        if _is_sym(e.right, SYMBOL_YES):
            return _assign(e, e.left)
    elif e.kind == ExprType.OR:
        e.left = eliminate_yn(e.left)
        e.right = eliminate_yn(e.right)
        if _is_sym(e.left, SYMBOL_NO):
            return _assign(e, e.right)
        if _is_sym(e.left, SYMBOL_YES):
            return _collapse(e, SYMBOL_YES)
        if _is_sym(e.right, SYMBOL_NO):
            return _assign(e, e.left)
        if _is_sym(e.right, SYMBOL_YES):
            return _collapse(e, SYMBOL_YES)
    return e


def trans_bool(e: Optional[Expr]) -> Optional[Expr]:
    """Rewrite ``FOO!=n`` as ``FOO`` for tristate symbols, in place."""
    if e is None:
        return None
    if e.kind in (ExprType.AND, ExprType.OR, ExprType.NOT):
        e.left = trans_bool(e.left)
        e.right = trans_bool(e.right)
    elif e.kind == ExprType.UNEQUAL:
        if e.left.type == SymbolType.TRISTATE and e.right is SYMBOL_NO:
            e.kind = ExprType.SYMBOL
            e.right = None
    return e


def contains_symbol(dep: Optional[Expr], sym: Symbol) -> bool:
    """Tell whether a symbol occurs anywhere in an expression."""
    if dep is None:
        return False
    if dep.kind in (ExprType.AND, ExprType.OR):
        return contains_symbol(dep.left, sym) or contains_symbol(dep.right, sym)
    if dep.kind == ExprType.SYMBOL:
        return dep.left is sym
    if dep.kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        return dep.left is sym or dep.right is sym
    if dep.kind == ExprType.NOT:
        return contains_symbol(dep.left, sym)
    return False


def depends_symbol(dep: Optional[Expr], sym: Symbol) -> bool:
    """Tell whether an expression can only hold while the symbol is not n."""
    if dep is None:
        return False
    if dep.kind == ExprType.AND:
        return depends_symbol(dep.left, sym) or depends_symbol(dep.right, sym)
    if dep.kind == ExprType.SYMBOL:
        return dep.left is sym
    if dep.kind == ExprType.EQUAL:
        return dep.left is sym and (dep.right is SYMBOL_YES or dep.right is SYMBOL_MOD)
    if dep.kind == ExprType.UNEQUAL:
        return dep.left is sym and dep.right is SYMBOL_NO
    return False


def calc_value(e: Optional[Expr]) -> Tristate:
    """Evaluate an expression against the symbols' current values.

    A missing expression is always true.
    """
    if e is None:
        return Tristate.YES
    if e.kind == ExprType.SYMBOL:
        return Tristate(e.left.tri)
    if e.kind == ExprType.AND:
        return tri_and(calc_value(e.left), calc_value(e.right))
    if e.kind == ExprType.OR:
        return tri_or(calc_value(e.left), calc_value(e.right))
    if e.kind == ExprType.NOT:
        return tri_not(calc_value(e.left))
    if e.kind in (ExprType.EQUAL, ExprType.UNEQUAL):
        same = e.left.string_value == e.right.string_value
        if e.kind == ExprType.UNEQUAL:
            same = not same
        return Tristate.YES if same else Tristate.NO
    raise ValueError(f"cannot evaluate an expression of kind {e.kind.name}")


def is_yes(e: Optional[Expr]) -> bool:
    """Tell whether an expression is missing or the literal y."""
    return e is None or _is_sym(e, SYMBOL_YES)


def is_no(e: Optional[Expr]) -> bool:
    """Tell whether an expression is the literal n."""
    return e is not None and _is_sym(e, SYMBOL_NO)