import pytest

from carlkit.expr import (
    SYMBOL_MOD,
    SYMBOL_NO,
    SYMBOL_YES,
    ExprType,
    Symbol,
    SymbolType,
    binary_expr,
    comparison_expr,
    expr_eq,
    is_no,
    is_yes,
    symbol_expr,
    unary_expr,
)
from carlkit.simplify import (
    eliminate_dups,
    extract_eq,
    extract_eq_and,
    extract_eq_or,
    simplify_unmet_dep,
    trans_compare,
    transform,
)


@pytest.fixture
def syms():
    return {
        "A": Symbol("A", SymbolType.BOOLEAN),
        "B": Symbol("B", SymbolType.BOOLEAN),
        "C": Symbol("C", SymbolType.BOOLEAN),
        "T": Symbol("T", SymbolType.TRISTATE),
    }


def test_transform_none():
    assert transform(None) is None


def test_transform_bool_equal_no_becomes_not(syms):
    a = syms["A"]
    result = transform(comparison_expr(ExprType.EQUAL, a, SYMBOL_NO))
    assert result.kind == ExprType.NOT
    assert result.left.kind == ExprType.SYMBOL
    assert result.left.left is a


def test_transform_bool_equal_yes_becomes_symbol(syms):
    a = syms["A"]
    result = transform(comparison_expr(ExprType.EQUAL, a, SYMBOL_YES))
    assert result.kind == ExprType.SYMBOL
    assert result.left is a


def test_transform_bool_equal_mod_forced_to_no(syms):
    result = transform(comparison_expr(ExprType.EQUAL, syms["A"], SYMBOL_MOD))
    assert is_no(result)


def test_transform_bool_unequal(syms):
    a = syms["A"]
    assert transform(comparison_expr(ExprType.UNEQUAL, a, SYMBOL_NO)).left is a
    negated = transform(comparison_expr(ExprType.UNEQUAL, a, SYMBOL_YES))
    assert negated.kind == ExprType.NOT and negated.left.left is a
    assert is_yes(transform(comparison_expr(ExprType.UNEQUAL, a, SYMBOL_MOD)))


def test_transform_tristate_compare_unchanged(syms):
    t = syms["T"]
    result = transform(comparison_expr(ExprType.EQUAL, t, SYMBOL_YES))
    assert result.kind == ExprType.EQUAL
    assert result.left is t and result.right is SYMBOL_YES


def test_transform_double_negation(syms):
    a = syms["A"]
    result = transform(unary_expr(ExprType.NOT, unary_expr(ExprType.NOT, symbol_expr(a))))
    assert result.kind == ExprType.SYMBOL and result.left is a


def test_transform_negated_compare_flips(syms):
    t = syms["T"]
    result = transform(unary_expr(ExprType.NOT, comparison_expr(ExprType.EQUAL, t, SYMBOL_YES)))
    assert result.kind == ExprType.UNEQUAL
    assert result.left is t and result.right is SYMBOL_YES


def test_transform_de_morgan(syms):
    a, b = syms["A"], syms["B"]
    result = transform(
        unary_expr(ExprType.NOT, binary_expr(ExprType.OR, symbol_expr(a), symbol_expr(b)))
    )
    assert result.kind == ExprType.AND
    assert result.left.kind == ExprType.NOT and result.left.left.left is a
    assert result.right.kind == ExprType.NOT and result.right.left.left is b


@pytest.mark.parametrize(
    "literal, expected",
    [(SYMBOL_YES, SYMBOL_NO), (SYMBOL_MOD, SYMBOL_MOD), (SYMBOL_NO, SYMBOL_YES)],
)
def test_transform_negated_literal(literal, expected):
    result = transform(unary_expr(ExprType.NOT, symbol_expr(literal)))
    assert result.kind == ExprType.SYMBOL
    assert result.left is expected


def test_extract_eq_and_shared_term(syms):
    a, b, c = syms["A"], syms["B"], syms["C"]
    e1 = binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(b))
    e2 = binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(c))
    common, rest1, rest2 = extract_eq_and(e1, e2)
    assert common.kind == ExprType.SYMBOL and common.left is a
    assert rest1.kind == ExprType.SYMBOL and rest1.left is b
    assert rest2.kind == ExprType.SYMBOL and rest2.left is c


def test_extract_eq_or_nothing_shared(syms):
    a, b, c = syms["A"], syms["B"], syms["C"]
    e1 = binary_expr(ExprType.OR, symbol_expr(a), symbol_expr(b))
    e2 = symbol_expr(c)
    common, rest1, rest2 = extract_eq_or(e1, e2)
    assert common is None
    assert rest1 is e1 and rest2 is e2


def test_extract_eq_leaves_neutral_literals(syms):
    a = syms["A"]
    common, rest1, rest2 = extract_eq(ExprType.OR, symbol_expr(a), symbol_expr(a))
    assert common.left is a
    assert is_no(rest1) and is_no(rest2)


def test_eliminate_dups_none():
    assert eliminate_dups(None) is None


def test_eliminate_dups_repeated_or(syms):
    a = syms["A"]
    result = eliminate_dups(binary_expr(ExprType.OR, symbol_expr(a), symbol_expr(a)))
    assert result.kind == ExprType.SYMBOL and result.left is a


def test_eliminate_dups_repeated_and(syms):
    a = syms["A"]
    result = eliminate_dups(binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(a)))
    assert result.kind == ExprType.SYMBOL and result.left is a


def test_eliminate_dups_bool_or_with_negation_is_yes(syms):
    a = syms["A"]
    e = binary_expr(ExprType.OR, symbol_expr(a), unary_expr(ExprType.NOT, symbol_expr(a)))
    assert is_yes(eliminate_dups(e))


def test_eliminate_dups_tristate_y_or_m(syms):
    t = syms["T"]
    e = binary_expr(
        ExprType.OR,
        comparison_expr(ExprType.EQUAL, t, SYMBOL_YES),
        comparison_expr(ExprType.EQUAL, t, SYMBOL_MOD),
    )
    result = eliminate_dups(e)
    assert result.kind == ExprType.UNEQUAL
    assert result.left is t and result.right is SYMBOL_NO


def test_eliminate_dups_contradiction_is_no(syms):
    a, b = syms["A"], syms["B"]
    either = binary_expr(ExprType.OR, symbol_expr(a), symbol_expr(b))
    neither = binary_expr(
        ExprType.AND,
        unary_expr(ExprType.NOT, symbol_expr(a)),
        unary_expr(ExprType.NOT, symbol_expr(b)),
    )
    assert is_no(eliminate_dups(binary_expr(ExprType.AND, either, neither)))


def test_eliminate_dups_leaves_independent_terms(syms):
    a, b = syms["A"], syms["B"]
    e = binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(b))
    original = e.copy()
    assert expr_eq(eliminate_dups(e), original)


def test_trans_compare_missing_expression(syms):
    a = syms["A"]
    assert is_yes(trans_compare(None, ExprType.EQUAL, SYMBOL_YES))
    negated = trans_compare(None, ExprType.UNEQUAL, a)
    assert negated.kind == ExprType.NOT and negated.left.left is a


def test_trans_compare_symbol(syms):
    a = syms["A"]
    result = trans_compare(symbol_expr(a), ExprType.EQUAL, SYMBOL_YES)
    assert result.kind == ExprType.EQUAL
    assert result.left is a and result.right is SYMBOL_YES


@pytest.mark.parametrize(
    "sym, outer", [(SYMBOL_YES, ExprType.AND), (SYMBOL_NO, ExprType.OR)]
)
def test_trans_compare_and(syms, sym, outer):
    a, b = syms["A"], syms["B"]
    e = binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(b))
    result = trans_compare(e, ExprType.EQUAL, sym)
    assert result.kind == outer
    assert result.left.kind == ExprType.EQUAL and result.left.left is a
    assert result.right.right is sym


def test_trans_compare_not_flips(syms):
    a = syms["A"]
    result = trans_compare(unary_expr(ExprType.NOT, symbol_expr(a)), ExprType.EQUAL, SYMBOL_YES)
    assert result.kind == ExprType.UNEQUAL and result.left is a


def test_trans_compare_on_comparison(syms):
    t = syms["T"]
    cmp = comparison_expr(ExprType.EQUAL, t, SYMBOL_YES)
    assert is_no(trans_compare(cmp, ExprType.EQUAL, SYMBOL_MOD))
    assert is_yes(trans_compare(cmp, ExprType.UNEQUAL, SYMBOL_MOD))
    kept = trans_compare(cmp, ExprType.UNEQUAL, SYMBOL_NO)
    assert kept is not cmp and expr_eq(kept, cmp)
    negated = trans_compare(cmp, ExprType.EQUAL, SYMBOL_NO)
    assert negated.kind == ExprType.NOT and expr_eq(negated.left, cmp)


def test_simplify_unmet_dep_plain_symbol(syms):
    a, b = syms["A"], syms["B"]
    source = symbol_expr(a)
    result = simplify_unmet_dep(source, symbol_expr(b))
    assert result is not source
    assert result.kind == ExprType.SYMBOL and result.left is a


def test_simplify_unmet_dep_covered(syms):
    a, b = syms["A"], syms["B"]
    e1 = binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(b))
    assert simplify_unmet_dep(e1, symbol_expr(a)) is None


def test_simplify_unmet_dep_uncovered(syms):
    a, b, c = syms["A"], syms["B"], syms["C"]
    e1 = binary_expr(ExprType.AND, symbol_expr(a), symbol_expr(b))
    result = simplify_unmet_dep(e1, symbol_expr(c))
    assert result.kind == ExprType.SYMBOL and result.left is a


def test_simplify_unmet_dep_or(syms):
    a, b, c = syms["A"], syms["B"], syms["C"]
    e1 = binary_expr(ExprType.OR, symbol_expr(a), symbol_expr(b))
    result = simplify_unmet_dep(e1, symbol_expr(c))
    assert result.kind == ExprType.AND
    assert result.left.left is a and result.right.left is b