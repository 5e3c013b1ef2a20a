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
"""Candidate terms: the unknowns of the partial fraction linear system"""

from typing import List, Sequence
import logging
from partialfrac.combinatorics import FactorCombination
from partialfrac.errors import MismatchedListLengthError
from partialfrac.polynomial import Polynomial, effective_degree_count, equal, shift

LOG = logging.getLogger(__name__)


class CandidateTerm(object):
    """A factor combination times x^power

    Args:
        combination (FactorCombination):
            The combination the term is built from. Each candidate holds its
            own copy.

        power (int):
            Power of x the expanded combination is multiplied with.

        polynomial (Polynomial):
            Expanded combination shifted by power.
    """

    def __init__(self, combination: FactorCombination, power: int, polynomial: Polynomial):
        self.combination = combination
        self.power = power
        self.polynomial = polynomial

    def __repr__(self):
        return "CandidateTerm(" + repr(self.combination) + ", power=" + str(self.power) + ")"

    def __str__(self):
        return str(self.polynomial)


def max_numerator_power(coef_count: int, numerator_count: int) -> int:
    """Highest power of x a combination polynomial is multiplied with

    A polynomial with coef_count significant coefficients admits powers up to
    coef_count - 1, as long as the shifted polynomial does not have more
    coefficients than the numerator. A negative value means that not even the
    unshifted polynomial fits.
    """
    max_power = coef_count - 1
    if coef_count + max_power > numerator_count:
        max_power = numerator_count - coef_count
    return max_power


def flat_candidates(combinations: Sequence[FactorCombination], polynomials: Sequence[Polynomial]) -> List[CandidateTerm]:
    """One candidate of power 0 per combination"""
    if len(combinations) != len(polynomials):
        raise MismatchedListLengthError(len(combinations), len(polynomials))
    return [CandidateTerm(c.copy(), 0, p.copy()) for c, p in zip(combinations, polynomials)]


def numerator_power_candidates(numerator: Polynomial, combinations: Sequence[FactorCombination],
                               polynomials: Sequence[Polynomial]) -> List[CandidateTerm]:
    """Candidates for every combination times x^0 ... x^p_max (see max_numerator_power)"""
    if len(combinations) != len(polynomials):
        raise MismatchedListLengthError(len(combinations), len(polynomials))
    numerator_count = len(numerator)
    candidates = []
    for combination, polynomial in zip(combinations, polynomials):
        max_power = max_numerator_power(effective_degree_count(polynomial), numerator_count)
        if max_power < 0:
            LOG.debug("Combination " + str(combination) + " exceeds the numerator degree, no candidate.")
        for power in range(max_power + 1):
            candidates.append(CandidateTerm(combination.copy(), power, shift(polynomial, power)))
    return candidates


def dedup_candidates(candidates: Sequence[CandidateTerm]) -> List[CandidateTerm]:
    """Drop candidates whose polynomial equals the one of an earlier candidate"""
    kept = []
    kept_polynomials = []
    for candidate in candidates:
        polynomial = candidate.polynomial.trimmed()
        if any(equal(polynomial, p) for p in kept_polynomials):
            LOG.debug("Dropping duplicate candidate " + repr(candidate) + ".")
            continue
        kept.append(candidate)
        kept_polynomials.append(polynomial)
    return kept


def build_candidates(numerator: Polynomial,
                     combinations: Sequence[FactorCombination],
                     polynomials: Sequence[Polynomial],
                     allow_power_numerators=True) -> List[CandidateTerm]:
    """Candidate terms for the linear system

    Args:
        numerator (Polynomial):
            Numerator of the rational function. Its length bounds the powers
            of x in numerator power mode.

        combinations, polynomials (lists):
            Deduplicated combinations and their expanded polynomials.

        allow_power_numerators (optional (bool)): (Default: True)
            If 'True', combinations are also multiplied with powers of x, such
            that fractions like (ax + b)/(x^2 + 3) can be represented.
            Otherwise every combination yields exactly one candidate.

    Returns:
        (list of CandidateTerm):
        Candidates with pairwise different polynomials.
    """
    if allow_power_numerators:
        candidates = numerator_power_candidates(numerator, combinations, polynomials)
    else:
        candidates = flat_candidates(combinations, polynomials)
    return dedup_candidates(candidates)
