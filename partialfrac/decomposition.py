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
"""Function: computing partial fraction decompositions (decompose)"""

from typing import List, Sequence
import logging
from partialfrac.names import *
from partialfrac.errors import DecompositionInconsistentError
from partialfrac.polynomial import Polynomial, as_polynomial, format_monomial, near_zero
from partialfrac.combinatorics import FactorCombination, complement, dedup, enumerate_combinations, expand, \
                                      expand_all, factor_out_constant
from partialfrac.numerator_powers import build_candidates
from partialfrac.linear_system import LinearSystem
from partialfrac.gauss import Gauss

LOG = logging.getLogger(__name__)


class DecompositionTerm(object):
    """A single fraction multiplier * x^power / denominator

    Args:
        multiplier (float):
            Scalar factor of the term, front constant included.

        power (int):
            Power of x in the numerator of the term.

        combination (FactorCombination):
            Denominator factors of the term. An empty combination stands for
            the denominator 1, i.e. a polynomial term.
    """

    def __init__(self, multiplier: float, power: int, combination: FactorCombination):
        self.multiplier = float(multiplier)
        self.power = power
        self.combination = combination
        if len(combination) == 0:
            self.denominator = Polynomial([1.0])
        else:
            self.denominator = expand(combination)

    def evaluate(self, x):
        return self.multiplier * x**self.power / self.denominator.evaluate(x)

    def as_tuple(self):
        """(multiplier, power, denominator coefficients)"""
        return self.multiplier, self.power, self.denominator.coefs.tolist()

    def __repr__(self):
        return "DecompositionTerm(" + format(self.multiplier, 'g') + ", power=" + str(self.power) + ", denominator=" + \
               repr(self.denominator) + ")"

    def __str__(self):
        return self.to_string(is_first=True)

    def to_string(self, is_first=True) -> str:
        return format_monomial(self.multiplier, self.power, is_first) + "/(" + str(self.denominator) + ")"


class Decomposition(object):
    """Container for the result of a partial fraction decomposition

    Objects of this class are returned by decompose and are not meant to be
    created by users. The terms already include the front constant, so their
    sum equals numerator / product(denominator).

    Args:
        numerator (Polynomial):
            Numerator of the decomposed rational function.

        denominator (list of Polynomial):
            All denominator factors, constant factors included.

        front_constant (float):
            Reciprocal of the product of the constant denominator factors.

        terms (list of DecompositionTerm):
            Fractions with non-zero multipliers.

        status (str):
            CONSISTENT, POLYNOMIAL (no non-constant denominator factor) or
            INCONSISTENT (no decomposition found, terms are empty).

        pfd_setup (dict):
            The options used for the decomposition.

        error (optional (DecompositionInconsistentError)):
            Reason of an inconsistent result.
    """

    def __init__(self, numerator, denominator, front_constant, terms, status, pfd_setup, error=None):
        self.numerator = numerator
        self.denominator = list(denominator)
        self.front_constant = front_constant
        self.terms = list(terms)
        self.status = status
        self.pfd_setup = pfd_setup
        self.error = error

    @property
    def is_consistent(self) -> bool:
        return self.status != INCONSISTENT

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __getitem__(self, i):
        return self.terms[i]

    def get_terms(self) -> List[tuple]:
        """Terms as (multiplier, power, denominator coefficients) tuples"""
        return [t.as_tuple() for t in self.terms]

    def raise_for_status(self):
        """Raise the DecompositionInconsistentError of an inconsistent result"""
        if self.error is not None:
            raise self.error

    def evaluate(self, x):
        """Value of the sum of all terms at x"""
        self.raise_for_status()
        return sum((t.evaluate(x) for t in self.terms), 0.0)

    def evaluate_original(self, x):
        """Value of numerator / product(denominator) at x"""
        value = self.numerator.evaluate(x)
        for factor in self.denominator:
            value /= factor.evaluate(x)
        return value

    def __str__(self):
        if self.error is not None:
            return "Can't find the partial fraction decomposition"
        if not self.terms:
            return '0'
        return ''.join(t.to_string(is_first=(i == 0)) for i, t in enumerate(self.terms))

    def __repr__(self):
        return "Decomposition(status=" + self.status + ", front_constant=" + format(self.front_constant, 'g') + \
               ", " + str(len(self.terms)) + " terms)"


def _polynomial_terms(numerator: Polynomial, front_constant: float) -> List[DecompositionTerm]:
    # numerator / constant, one term per monomial over the denominator 1
    no_factors = FactorCombination([], ())
    return [
        DecompositionTerm(c * front_constant, power, no_factors)
        for power, c in enumerate(numerator.coefs)
        if not near_zero(c)
    ]


def decompose(numerator, denominator: Sequence, **kwargs) -> Decomposition:
    """Computes the partial fraction decomposition of numerator / product(denominator)

    The denominator is given as a list of factors, repeated factors express
    multiplicity. Constant factors are split off first. Every non-empty
    combination of the remaining factors, optionally multiplied with powers of
    x, becomes an unknown of a linear system whose equations compare the
    coefficients of each power of x with the numerator. The system is solved
    by Gauss-Jordan elimination, and every combination with a non-zero
    solution yields the fraction solution * x^power / complement, where the
    complement consists of the denominator factors not in the combination.

    Example:
        pfd = decompose([375, -199, 36, -2], [[0, 1], [-5, 1], [-5, 1], [-5, 1], [2]])

    Args:
        numerator (Polynomial or list of float):
            Numerator coefficients in ascending order. Its length determines the
            number of equations and is not trimmed.

        denominator (list of Polynomial or lists of float):
            Denominator factors.

        allow_power_numerators (optional (bool)): (Default: True)
            If 'True', combinations are also multiplied with x, x^2, ..., up to a
            bound given by their degree and the numerator length. This allows
            terms such as (ax + b)/(x^2 + 3).

        bounded_enumeration (optional (bool)): (Default: False)
            If 'True', the combination of all denominator factors is not
            enumerated (for two or more factors), which excludes a polynomial
            part from the decomposition.

        pfd_setup (optional (dict)):
            A dictionary with the options above. Must not be used together
            with them.

    Returns:
        (Decomposition):
        Object containing the front constant and the decomposition terms. If no
        decomposition exists for the candidate basis, its status is
        INCONSISTENT and it holds no terms.
    """
    allowed_keys = {ALLOW_POWER_NUMERATORS, BOUNDED_ENUMERATION}
    if SETUP in kwargs:
        if len(kwargs) > 1:
            raise Exception("Key " + SETUP + " must not be combined with other arguments.")
        kwargs = dict(kwargs[SETUP])
    for key in kwargs:
        if key not in allowed_keys:
            raise Exception("Key " + key + " is not supported.")
    pfd_setup = {ALLOW_POWER_NUMERATORS: True, BOUNDED_ENUMERATION: False}
    pfd_setup.update(kwargs)

    numerator = as_polynomial(numerator)
    denominator = [as_polynomial(f) for f in denominator]
    if not denominator:
        raise ValueError("The denominator needs at least one factor.")

    constant, factors = factor_out_constant(denominator)
    front_constant = 1 / constant
    LOG.info("Decomposing (" + str(numerator) + ")/" + format(constant, 'g') +
             ''.join('(' + str(f) + ')' for f in factors) + ".")

    if not factors:
        LOG.info("  Denominator is constant, the result is a polynomial.")
        return Decomposition(numerator, denominator, front_constant, _polynomial_terms(numerator, front_constant),
                             POLYNOMIAL, pfd_setup)

    # one equation per power below the denominator degree at least
    degree = sum(f.degree for f in factors)
    if len(numerator) < degree:
        LOG.debug("  Padding numerator to " + str(degree) + " coefficients.")
        numerator = numerator.padded(degree)

    combinations = enumerate_combinations(factors, bounded=pfd_setup[BOUNDED_ENUMERATION])
    polynomials = expand_all(combinations)
    combinations, polynomials = dedup(combinations, polynomials)
    LOG.info("  " + str(len(combinations)) + " distinct factor combinations.")

    candidates = build_candidates(numerator, combinations, polynomials, pfd_setup[ALLOW_POWER_NUMERATORS])
    system = LinearSystem(candidates, numerator)
    LOG.info("  Solving system of " + str(system.height) + " equations in " + str(system.candidate_count) +
             " candidate terms.")

    gauss = Gauss.get_instance()
    rank = gauss.rref(system.matrix)
    if rank < system.candidate_count:
        LOG.debug("  Rank " + str(rank) + ", terms of free columns are set to zero.")
    try:
        multiples = gauss.extract_leading_values(system.matrix, system.candidate_count)
    except DecompositionInconsistentError as error:
        LOG.warning("Can't find the partial fraction decomposition. " + str(error))
        return Decomposition(numerator, denominator, front_constant, [], INCONSISTENT, pfd_setup, error=error)

    terms = []
    for candidate, multiple in zip(system.candidates, multiples):
        if near_zero(multiple):
            continue
        remaining = complement(factors, candidate.combination)
        terms.append(DecompositionTerm(multiple * front_constant, candidate.power, remaining))
    LOG.info(str(len(terms)) + " terms found.")
    return Decomposition(numerator, denominator, front_constant, terms, CONSISTENT, pfd_setup)
