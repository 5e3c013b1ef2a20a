"""Test candidate term construction and the linear system layout."""
import pytest
import numpy as np
from partialfrac import Polynomial, FactorCombination, MismatchedListLengthError, CandidateTerm, LinearSystem, \
                        max_numerator_power, flat_candidates, numerator_power_candidates, dedup_candidates, \
                        build_candidates, make_matrix, enumerate_combinations, expand_all, dedup, \
                        factor_out_constant, equal


@pytest.fixture
def surviving(quadratic_denominator):
    combinations = enumerate_combinations(quadratic_denominator)
    return dedup(combinations, expand_all(combinations))


def test_max_numerator_power():
    assert (max_numerator_power(2, 5) == 1)
    assert (max_numerator_power(3, 5) == 2)
    assert (max_numerator_power(4, 5) == 1)
    assert (max_numerator_power(5, 5) == 0)
    assert (max_numerator_power(6, 5) == -1)
    assert (max_numerator_power(0, 5) == -1)


def test_flat_candidates(surviving):
    candidates = flat_candidates(*surviving)
    assert (len(candidates) == len(surviving[0]))
    assert (all(c.power == 0 for c in candidates))
    assert (candidates[0].polynomial is not surviving[1][0])
    with pytest.raises(MismatchedListLengthError):
        flat_candidates(surviving[0], surviving[1][:-1])


def test_numerator_power_candidates(surviving):
    numerator = Polynomial([-44, -8, -26, -2, -4])
    candidates = numerator_power_candidates(numerator, *surviving)
    # (x+1): 0,1  full: none  (x+1)(x^2+3): 0,1  (x^2+3)^2: 0  (x^2+3): 0,1,2
    assert ([(c.combination.slots, c.power) for c in candidates] == [((0,), 0), ((0,), 1), ((0, 2), 0), ((0, 2), 1),
                                                                      ((1, 2), 0), ((2,), 0), ((2,), 1), ((2,), 2)])
    assert (all(len(c.polynomial) <= len(numerator) for c in candidates))
    assert (candidates[7].polynomial == Polynomial([0, 0, 3, 0, 1]))


def test_dedup_candidates_after_power_expansion(repeated_denominator):
    _, factors = factor_out_constant(repeated_denominator)
    combinations = enumerate_combinations(factors)
    combinations, polynomials = dedup(combinations, expand_all(combinations))
    numerator = Polynomial([375, -199, 36, -2])
    expanded = numerator_power_candidates(numerator, combinations, polynomials)
    candidates = build_candidates(numerator, combinations, polynomials, allow_power_numerators=True)
    # x(x-5) equals (x-5)*x and x(x-5)^2 equals (x-5)^2*x
    assert (len(expanded) == 10)
    assert (len(candidates) == 8)
    for i, c in enumerate(candidates):
        assert (not any(equal(c.polynomial, d.polynomial) for d in candidates[i + 1:]))
    assert (dedup_candidates(candidates) == candidates)


def test_build_candidates_without_powers(surviving):
    numerator = Polynomial([-44, -8, -26, -2, -4])
    candidates = build_candidates(numerator, *surviving, allow_power_numerators=False)
    assert (len(candidates) == 5)
    assert (all(c.power == 0 for c in candidates))


def test_matrix_layout():
    combination = FactorCombination([Polynomial([1, 1])], [0])
    candidates = [
        CandidateTerm(combination, 0, Polynomial([1, 1])),
        CandidateTerm(combination, 1, Polynomial([0, 1, 1])),
    ]
    numerator = Polynomial([4, 5, 6, 7])
    matrix = make_matrix(candidates, numerator)
    np.testing.assert_array_equal(matrix, [[1, 0, 4], [1, 1, 5], [0, 1, 6], [0, 0, 7]])


def test_matrix_grows_for_long_candidates():
    combination = FactorCombination([Polynomial([1, 1])], [0])
    candidates = [CandidateTerm(combination, 2, Polynomial([0, 0, 1, 1]))]
    system = LinearSystem(candidates, Polynomial([1, 2]))
    assert (system.height == 4)
    assert (system.width == 2)
    assert (system.candidate_count == 1)
    np.testing.assert_array_equal(system.matrix[:, -1], [1, 2, 0, 0])
    np.testing.assert_array_equal(system.matrix[:, 0], [0, 0, 1, 1])


def test_matrix_ignores_trailing_zero_coefficients():
    combination = FactorCombination([Polynomial([1, 1])], [0])
    candidates = [CandidateTerm(combination, 0, Polynomial([1, 1, 0, 0, 0]))]
    matrix = make_matrix(candidates, Polynomial([1, 2, 3]))
    assert (matrix.shape == (3, 2))


def test_candidates_own_their_combinations(surviving):
    numerator = Polynomial([-44, -8, -26, -2, -4])
    candidates = numerator_power_candidates(numerator, *surviving)
    first, second = candidates[0], candidates[1]
    assert (first.combination.slots == second.combination.slots)
    assert (first.combination is not second.combination)
    first.combination.factors[0].coefs[0] = 99
    assert (second.combination.factors[0][0] == 1)
    assert (surviving[0][0].factors[0][0] == 1)
    flat = flat_candidates(*surviving)
    assert (flat[0].combination is not surviving[0][0])
