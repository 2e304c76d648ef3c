import math
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from minilisp.errors import IncompatibleType, DivisionByZero
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import read
from minilisp.types.environment import Environment
from minilisp.types import Void
from minilisp.types.numeric import INT64_MIN, INT64_MAX, wrap_int64


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 5)", 5),
        ("(+ 2 3 4)", 9),
        ("(- 10 3 2)", 5),
        ("(- 5)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        ("(+ -1 5 -3)", 1),
        ("(+ 9223372036854775807 1)", INT64_MIN),
        ("(- -9223372036854775808 1)", INT64_MAX),
        ("(/ -9223372036854775808 -1)", INT64_MIN),
    ]
)
def test_integer_arithmetic(run, source, expected):
    result = run(source)
    assert type(result) is int
    assert result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+. 1.5 2.5)", 4.0),
        ("(-. 1.0 0.25)", 0.75),
        ("(*. 2.0 0.5 3.0)", 3.0),
        ("(/. 1.0 4.0)", 0.25),
        ("(+. 1. .5)", 1.5),
        ("(/. 1.0 0.0)", math.inf),
        ("(/. -1.0 0.0)", -math.inf),
        ("(/. 1.0 -0.0)", -math.inf),
    ]
)
def test_float_arithmetic(run, source, expected):
    result = run(source)
    assert type(result) is float
    assert result == expected


def test_float_zero_by_zero_is_nan(run):
    assert math.isnan(run("(/. 0.0 0.0)"))


def test_no_operands_is_void(run):
    assert run("(+)") is Void
    assert run("(*.)") is Void
    assert run("(=)") is Void


def test_single_operand_is_passed_through_unchecked(run):
    assert run("(+ 1.5)") == 1.5
    assert run("(+. 3)") == 3
    assert run("(< true)") is True


@pytest.mark.parametrize(
    "source,expected,got",
    [
        ("(+ 1 1.0)", "Integer", "Float"),
        ("(+ 1.0 1)", "Integer", "Float"),
        ("(+. 1 2.0)", "Float", "Integer"),
        ("(* 2 true)", "Integer", "Bool"),
        ("(+ (+) 1)", "Integer", "Void"),
        ("(+ 1 (list 1 2))", "Integer", "List"),
        ("(= 1 1)", "Bool", "Integer"),
        ("(< 1.0 2.0)", "Bool", "Float"),
    ]
)
def test_incompatible_types(run, source, expected, got):
    with pytest.raises(IncompatibleType) as exc:
        run(source)
    assert exc.value.expected == expected
    assert exc.value.got == got


def test_integer_division_by_zero(run):
    with pytest.raises(DivisionByZero):
        run("(/ 1 0)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= true true)", True),
        ("(= true false)", False),
        ("(= false false)", True),
        ("(> true false)", True),
        ("(< true false)", False),
        ("(>= false false)", True),
        ("(<= false true)", True),
        ("(= true true false)", False),
        ("(= false true false)", True),
    ]
)
def test_comparisons_fold_over_booleans(run, source, expected):
    assert run(source) is expected


def test_operands_are_evaluated_left_to_right(run):
    # the Void from define seeds the accumulator, then 2 cannot combine with it
    with pytest.raises(IncompatibleType):
        run("(+ (define a 1) 2)")
    assert run("a") == 1


def _eval(source):
    # hypothesis tests cannot share function-scoped fixtures
    [expr] = read(source)
    return evaluate(expr, Environment())


int64 = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


@given(st.lists(int64, min_size=1, max_size=8))
def test_addition_folds_with_wraparound(xs):
    source = f"(+ {' '.join(map(str, xs))})"
    assert _eval(source) == wrap_int64(sum(xs))


@given(
    st.integers(min_value=-10**9, max_value=10**9),
    st.integers(min_value=-10**9, max_value=10**9).filter(lambda b: b != 0),
)
def test_division_truncates_toward_zero(a, b):
    assert _eval(f"(/ {a} {b})") == int(Fraction(a, b))
