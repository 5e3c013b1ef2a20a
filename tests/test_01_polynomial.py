"""Test polynomial arithmetic and tolerance handling."""
import pytest
import numpy as np
from partialfrac import Polynomial, add, scale, multiply, shift, equal, effective_degree_count, near_zero, \
                        near_equal, as_polynomial, format_polynomial

p1 = Polynomial([375, -199, 36, -2])
p2 = Polynomial([1, 1])
p3 = Polynomial([3, 0, 1, 0, 0])
pairs = [(p1, p2), (p2, p3), (p3, p1), (p1, p1)]
sample_points = [-2.5, -0.5, 0.5, 1.5, 3.0, 7.0]


def test_tolerance_boundary():
    assert (near_zero(0.009999))
    assert (near_zero(-0.009999))
    assert (not near_zero(0.011))
    assert (not near_zero(-0.011))
    assert (near_equal(1.005, 1.0))
    assert (not near_equal(1.02, 1.0))


def test_tolerance_in_degree_count():
    assert (effective_degree_count(Polynomial([1, 2, 0.009999])) == 2)
    assert (effective_degree_count(Polynomial([1, 2, 0.011])) == 3)


@pytest.mark.parametrize("a,b", pairs)
def test_multiply_evaluates_to_product(a, b):
    for x0 in sample_points:
        assert multiply(a, b).evaluate(x0) == pytest.approx(a.evaluate(x0) * b.evaluate(x0))


@pytest.mark.parametrize("a,b", pairs)
def test_add_evaluates_to_sum(a, b):
    for x0 in sample_points:
        assert add(a, b).evaluate(x0) == pytest.approx(a.evaluate(x0) + b.evaluate(x0))


@pytest.mark.parametrize("k", [0, 1, 3])
def test_shift_multiplies_with_power_of_x(k, x0):
    assert shift(p1, k).evaluate(x0) == pytest.approx(p1.evaluate(x0) * x0**k)
    assert (len(shift(p1, k)) == len(p1) + k)


def test_shift_negative_amount():
    with pytest.raises(ValueError):
        shift(p1, -1)


def test_scale(x0):
    assert scale(p1, -0.5).evaluate(x0) == pytest.approx(-0.5 * p1.evaluate(x0))
    assert (len(scale(p3, 2)) == len(p3))


def test_multiply_length_uses_significant_coefficients():
    product = multiply(p2, p3)
    assert (len(product) == 4)
    np.testing.assert_allclose(product.coefs, [3, 3, 1, 1])


def test_multiply_zero_polynomial():
    assert (len(multiply(Polynomial([0, 0]), p1)) == 0)
    assert (len(multiply(p1, Polynomial())) == 0)
    assert (multiply(p1, Polynomial([0.001])).is_zero())


def test_add_keeps_tail_of_longer_operand():
    total = add(Polynomial([1, 2]), Polynomial([1, 1, 0, 7]))
    np.testing.assert_allclose(total.coefs, [2, 3, 0, 7])
    total = add(Polynomial([1, 1, 0, 7]), Polynomial([1, 2]))
    np.testing.assert_allclose(total.coefs, [2, 3, 0, 7])


def test_effective_degree_count_of_empty_and_zero():
    assert (effective_degree_count(Polynomial()) == 0)
    assert (effective_degree_count(Polynomial([0, 0.001, 0])) == 0)
    assert (Polynomial([0, 0]).degree == -1)
    assert (p3.coef_count == 3)


def test_equal_requires_same_length():
    assert (equal(Polynomial([1, 2]), Polynomial([1.001, 1.999])))
    assert (not equal(Polynomial([1, 2]), Polynomial([1, 2, 0])))
    assert (not equal(Polynomial([1, 2]), Polynomial([1, 2.5])))
    assert (Polynomial([1, 2]) == Polynomial([1, 2]))
    assert (Polynomial([1, 2]) != Polynomial([2, 1]))


def test_polynomials_own_their_coefficients():
    coefs = np.array([1.0, 2.0])
    p = Polynomial(coefs)
    coefs[0] = 5
    assert (p[0] == 1)
    q = p.copy()
    q.coefs[1] = 7
    assert (p[1] == 2)
    r = as_polynomial(p)
    assert (r is not p and r.coefs is not p.coefs)


def test_trimmed_and_padded():
    assert (len(p3.trimmed()) == 3)
    assert (len(p2.padded(4)) == 4)
    assert (len(p1.padded(2)) == 4)


def test_as_polynomial():
    assert (as_polynomial(2).coefs.tolist() == [2.0])
    assert (as_polynomial((1, 2)).coefs.tolist() == [1.0, 2.0])
    with pytest.raises(ValueError):
        Polynomial([[1, 2], [3, 4]])


def test_operators():
    assert ((p2 * p2) == Polynomial([1, 2, 1]))
    assert ((p2 + [0, 0, 1]) == Polynomial([1, 1, 1]))
    assert ((2 * p2) == Polynomial([2, 2]))
    assert (p2(3) == 4)


def test_format_polynomial():
    assert (format_polynomial(p1) == "-2x^3 + 36x^2 - 199x + 375")
    assert (str(Polynomial([-5, 1])) == "x - 5")
    assert (str(Polynomial([3, 0, 1])) == "x^2 + 3")
    assert (str(Polynomial([0, 0])) == "0")
