from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from uforth.interpreter import Interpreter
from uforth.types.errors import UForthDivisionByZero, UForthTypeMismatch, UForthStackUnderflow


def literal(n: int) -> str:
    """Source text pushing n; the reader has no negative literals."""
    return f"{-n} ~" if n < 0 else str(n)


def top(source: str):
    return Interpreter().eval(source).peek()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2 +", 3),
        ("10 3 -", 7),
        ("3 10 -", -7),
        ("6 7 *", 42),
        ("12 3 /", 4),
        ("7 2 /", 3),
        ("7 ~ 2 /", -3),  # truncates toward zero
        ("7 2 ~ /", -3),
        ("7 2 %", 1),
        ("7 ~ 2 %", -1),  # sign of the dividend
        ("7 2 ~ %", 1),
        ("2 10 ^", 1024),
        ("5 0 ^", 1),
        ("0 0 ^", 1),
        ("2 1 ~ ^", 0),  # 0.5 truncated
        ("1 1 ~ ^", 1),
        ("1 ~ 3 ~ ^", -1),
        ("2 100 ^", 2 ** 100),  # exact, no float rounding
        ("2 50000000 ~ ^", 0),  # huge negative exponents stay cheap
        ("3 ~ 3 ~ ^", 0),
        ("1 50000000 ~ ^", 1),
        ("1 ~ 50000000 ~ ^", 1),
        ("1 ~ 50000001 ~ ^", -1),
        ("5 ~", -5),
        ("5 ~ ~", 5),
        ("1 2 + 3 *", 9),
        ("20 10 + 2 5 * /", 3),
    ]
)
def test_arithmetic(source, expected):
    result = top(source)
    assert result == expected
    assert type(result) is int


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2 <", True),
        ("2 1 <", False),
        ("2 2 <=", True),
        ("3 2 <=", False),
        ("3 2 >", True),
        ("2 3 >", False),
        ("2 2 >=", True),
        ("1 2 >=", False),
        ("4 4 ==", True),
        ("4 5 ==", False),
        ("4 5 !=", True),
        ("4 4 !=", False),
        ("1 ~ 0 <", True),
    ]
)
def test_comparison(source, expected):
    result = top(source)
    assert result is expected


@pytest.mark.parametrize("source", ["5 0 /", "5 0 %", "0 1 ~ ^"])
def test_division_by_zero(source):
    with pytest.raises(UForthDivisionByZero):
        Interpreter().eval(source)


@pytest.mark.parametrize(
    "source",
    ["true 1 +", "1 false *", "foo 1 +", "true ~", "true false <", "{ 1 } 2 ==", "foo 1 ~ /"],
)
def test_non_integer_operand(source):
    with pytest.raises(UForthTypeMismatch):
        Interpreter().eval(source)


@pytest.mark.parametrize("source", ["+", "1 +", "~", "1 <", "1 !="])
def test_missing_operands(source):
    with pytest.raises(UForthStackUnderflow):
        Interpreter().eval(source)


def test_operands_untouched_on_type_error():
    interp = Interpreter()
    interp.eval("1 2")
    with pytest.raises(UForthTypeMismatch):
        interp.eval("true +")
    assert interp.stack.to_list() == [2, 1]


@given(st.integers(), st.integers())
def test_ring_operations(a, b):
    assert top(f"{literal(a)} {literal(b)} +") == a + b
    assert top(f"{literal(a)} {literal(b)} -") == a - b
    assert top(f"{literal(a)} {literal(b)} *") == a * b


@given(st.integers(), st.integers().filter(lambda n: n != 0))
def test_division_identity(a, b):
    q = top(f"{literal(a)} {literal(b)} /")
    r = top(f"{literal(a)} {literal(b)} %")
    assert q == int(Fraction(a, b))
    assert a == b * q + r


@given(st.integers(), st.integers())
def test_comparisons_match_python(a, b):
    prefix = f"{literal(a)} {literal(b)}"
    assert top(f"{prefix} <") is (a < b)
    assert top(f"{prefix} >=") is (a >= b)
    assert top(f"{prefix} ==") is (a == b)


@given(st.integers(min_value=-6, max_value=6).filter(lambda n: n != 0), st.integers(min_value=-40, max_value=-1))
def test_negative_power_truncates(a, b):
    assert top(f"{literal(a)} {literal(b)} ^") == int(Fraction(1, a ** -b))
