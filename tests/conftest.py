import pytest
from partialfrac import Polynomial

# points away from the roots of all denominators used in the tests
sample_points = [-2.5, -0.5, 0.5, 1.5, 3.0, 7.0]


@pytest.fixture(params=sample_points, scope="session")
def x0(request: pytest.FixtureRequest) -> float:
    """Provide session-level fixture for evaluation points."""
    return request.param


@pytest.fixture
def repeated_denominator():
    """x (x-5)^3 * 2"""
    return [Polynomial([0, 1]), Polynomial([-5, 1]), Polynomial([-5, 1]), Polynomial([-5, 1]), Polynomial([2])]


@pytest.fixture
def quadratic_denominator():
    """(x+1) (x^2+3)^2"""
    return [Polynomial([1, 1]), Polynomial([3, 0, 1]), Polynomial([3, 0, 1])]


@pytest.fixture
def distinct_linear_factors():
    return [Polynomial([-1, 1]), Polynomial([-2, 1]), Polynomial([-3, 1]), Polynomial([-4, 1])]
