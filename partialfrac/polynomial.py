#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Single-variable polynomials with float coefficients (Polynomial)

Coefficients are stored in ascending order, i.e. index i holds the factor of
x^i. A polynomial keeps the length it was created with, trailing coefficients
that are near zero are insignificant but not removed. The number of
significant coefficients is returned by effective_degree_count.

Every Polynomial owns its coefficient array. The constructor copies its input
and all operations return new polynomials, so coefficient storage is never
shared between two polynomials.
"""

from typing import Iterable, Sequence, Union
import numpy as np
from partialfrac.names import TOLERANCE


def near_zero(value) -> bool:
    """True if the magnitude of value is below the tolerance (0.01)"""
    return abs(value) < TOLERANCE


def near_equal(value1, value2) -> bool:
    """True if two values differ by less than the tolerance"""
    return near_zero(value1 - value2)


class Polynomial(object):
    """Polynomial in x with float coefficients in ascending order

    Example:
        p = Polynomial([375, -199, 36, -2])  # 375 - 199x + 36x^2 - 2x^3

    Args:
        coefs (iterable of float):
            Coefficients, coefs[i] being the coefficient of x^i. The values are
            copied into a new one-dimensional float array.
    """
    __slots__ = ('coefs',)
    __hash__ = None

    def __init__(self, coefs: Iterable[float] = ()):
        if not isinstance(coefs, np.ndarray):
            coefs = list(coefs)
        self.coefs = np.array(coefs, dtype=float)
        if self.coefs.ndim != 1:
            raise ValueError("Polynomial coefficients must form a one-dimensional sequence, got shape " +
                             str(self.coefs.shape) + ".")

    def __len__(self):
        return len(self.coefs)

    def __getitem__(self, power):
        return self.coefs[power]

    def __iter__(self):
        return iter(self.coefs.tolist())

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return equal(self, other)

    def __add__(self, other):
        return add(self, as_polynomial(other))

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return multiply(self, other)
        return scale(self, other)

    __rmul__ = __mul__

    def __call__(self, x):
        return self.evaluate(x)

    def __repr__(self):
        return "Polynomial(" + str(self.coefs.tolist()) + ")"

    def __str__(self):
        return format_polynomial(self)

    def copy(self) -> 'Polynomial':
        return Polynomial(self.coefs)

    @property
    def coef_count(self) -> int:
        return effective_degree_count(self)

    @property
    def degree(self) -> int:
        """Degree of the polynomial, -1 for the zero polynomial"""
        return effective_degree_count(self) - 1

    def is_zero(self) -> bool:
        return effective_degree_count(self) == 0

    def trimmed(self) -> 'Polynomial':
        """Copy without the insignificant trailing coefficients"""
        return Polynomial(self.coefs[:effective_degree_count(self)])

    def padded(self, length: int) -> 'Polynomial':
        """Copy extended with zero coefficients to at least length coefficients"""
        return Polynomial(np.concatenate((self.coefs, np.zeros(max(0, length - len(self.coefs))))))

    def evaluate(self, x):
        """Evaluate the polynomial at x (Horner scheme)"""
        result = 0.0
        for c in reversed(self.coefs):
            result = result * x + c
        return result


def as_polynomial(value: Union[Polynomial, Sequence[float]]) -> Polynomial:
    """Return an owned Polynomial for a Polynomial or a coefficient sequence"""
    if isinstance(value, Polynomial):
        return value.copy()
    if isinstance(value, (int, float, np.number)):
        return Polynomial([value])
    return Polynomial(value)


def effective_degree_count(p: Polynomial) -> int:
    """Number of coefficients up to and including the highest significant one

    Returns 0 for polynomials without coefficients and for polynomials whose
    coefficients are all near zero.
    """
    for i in range(len(p.coefs) - 1, -1, -1):
        if not near_zero(p.coefs[i]):
            return i + 1
    return 0


def add(a: Polynomial, b: Polynomial) -> Polynomial:
    """Sum of two polynomials

    The result has the length of the longer operand. Beyond the length of the
    shorter operand, the coefficients of the longer one are copied unchanged.
    """
    if len(a) >= len(b):
        first, second = a, b
    else:
        first, second = b, a
    coefs = first.coefs.copy()
    coefs[:len(second)] += second.coefs
    return Polynomial(coefs)


def scale(p: Polynomial, factor: float) -> Polynomial:
    """Multiply every coefficient of p with a scalar factor"""
    return Polynomial(p.coefs * factor)


def multiply(a: Polynomial, b: Polynomial) -> Polynomial:
    """Product of two polynomials

    Only the significant coefficients take part, the result has the length
    effective_degree_count(a) + effective_degree_count(b) - 1. If one of the
    operands is the zero polynomial, the product is the polynomial without
    coefficients.
    """
    count_a = effective_degree_count(a)
    count_b = effective_degree_count(b)
    if count_a == 0 or count_b == 0:
        return Polynomial()
    return Polynomial(np.convolve(a.coefs[:count_a], b.coefs[:count_b]))


def shift(p: Polynomial, amount: int) -> Polynomial:
    """Multiply p with x^amount by prepending amount zero coefficients"""
    if amount < 0:
        raise ValueError("Cannot shift a polynomial by a negative amount (" + str(amount) + ").")
    return Polynomial(np.concatenate((np.zeros(amount), p.coefs)))


def equal(a: Polynomial, b: Polynomial) -> bool:
    """Tolerance equality of two polynomials of the same length

    Polynomials of different length are never equal, no implicit padding is
    applied.
    """
    if len(a) != len(b):
        return False
    return all(near_zero(d) for d in a.coefs - b.coefs)


def _format_number(value) -> str:
    return format(value, 'g')


def format_monomial(coef, power, is_first=True) -> str:
    """Plain text of coef*x^power with its sign, '' if coef is near zero"""
    if near_zero(coef):
        return ''
    if coef < 0:
        sign = '-' if is_first else ' - '
        coef = -coef
    else:
        sign = '' if is_first else ' + '
    text = ''
    if power == 0 or not near_equal(coef, 1):
        text += _format_number(coef)
    if power > 0:
        text += 'x'
        if power > 1:
            text += '^' + str(power)
    return sign + text


def format_polynomial(p: Polynomial) -> str:
    """Plain text of a polynomial, highest power first, e.g. '-2x^3 + 36x^2 - 199x + 375'"""
    terms = []
    for power in range(effective_degree_count(p) - 1, -1, -1):
        term = format_monomial(p.coefs[power], power, is_first=not terms)
        if term:
            terms.append(term)
    if not terms:
        return '0'
    return ''.join(terms)
