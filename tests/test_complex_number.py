import pytest

from algokit.complex_number import Complex


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (Complex(1, 0), Complex(2, 0), Complex(3, 0)),
        (Complex(-1, 0), Complex(2, 0), Complex(1, 0)),
        (Complex(1, 1), Complex(0, 2), Complex(1, 3)),
        (Complex(0, -2), Complex(0, 3), Complex(0, 1)),
    ],
)
def test_sum(left, right, expected):
    assert left + right == expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (Complex(1, 0), Complex(2, 0), Complex(-1, 0)),
        (Complex(-1, 0), Complex(2, 0), Complex(-3, 0)),
        (Complex(1, 1), Complex(0, 2), Complex(1, -1)),
        (Complex(0, -2), Complex(0, 3), Complex(0, -5)),
    ],
)
def test_sub(left, right, expected):
    assert left - right == expected


def test_abs():
    assert Complex(1, 0).abs() == 1
    assert Complex(-1, 0).abs() == 1
    assert Complex(1, 1).abs() == pytest.approx(1.41421, rel=0.01)
    assert Complex(0, -2).abs() == 2


def test_builtin_abs_matches_method():
    value = Complex(3, -7)
    assert abs(value) == value.abs()


def test_inequality():
    assert not (Complex(1, 2) == Complex(2, 1))


def test_add_then_sub_round_trip():
    a, b = Complex(2.5, -1), Complex(-4, 8)
    assert (a + b) - b == a


def test_add_non_complex_raises():
    with pytest.raises(TypeError):
        Complex(1, 1) + 1