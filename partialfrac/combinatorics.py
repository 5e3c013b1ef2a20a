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
"""Functions: enumerating, expanding and deduplicating combinations of denominator factors"""

from functools import reduce
from typing import List, Sequence, Tuple
import logging
from partialfrac.errors import EmptyFactorSetError, MismatchedListLengthError
from partialfrac.polynomial import Polynomial, as_polynomial, effective_degree_count, equal, multiply

LOG = logging.getLogger(__name__)


class FactorCombination(object):
    """Ordered selection of denominator factors, identified by their slots

    Factors are referenced by their position (slot) in the source factor list
    and held as copies. Factors that are equal by value but stem from
    different slots, such as the three factors of (x-5)^3, remain distinct.

    Args:
        source (list of Polynomial):
            The factor list the slots refer to.

        slots (iterable of int):
            Increasing indices into source.
    """

    def __init__(self, source: Sequence[Polynomial], slots):
        self.slots = tuple(slots)
        self.factors = [source[i].copy() for i in self.slots]

    def __len__(self):
        return len(self.factors)

    def __iter__(self):
        return iter(self.factors)

    def __repr__(self):
        return "FactorCombination(slots=" + str(self.slots) + ")"

    def __str__(self):
        return ''.join('(' + str(f) + ')' for f in self.factors) or '1'

    def copy(self) -> 'FactorCombination':
        """Combination with the same slots and copies of the factors"""
        duplicate = FactorCombination(self.factors, range(len(self.factors)))
        duplicate.slots = self.slots
        return duplicate

    def expand(self) -> Polynomial:
        return expand(self)


def factor_out_constant(factors: Sequence) -> Tuple[float, List[Polynomial]]:
    """Separate the constant factors from a denominator

    Args:
        factors (list of Polynomial or coefficient lists):
            Denominator factors.

    Returns:
        (Tuple):
        The product of all constant (degree 0) factors and a list with copies
        of the remaining factors in their original order.
    """
    constant = 1.0
    remaining = []
    for factor in factors:
        factor = as_polynomial(factor)
        count = effective_degree_count(factor)
        if count == 0:
            raise ValueError("Denominator factor " + repr(factor) + " is the zero polynomial.")
        if count == 1:
            constant *= factor.coefs[0]
        else:
            remaining.append(factor)
    return constant, remaining


def _combination_slots(factor_count, bounded, stack=()):
    # stack holds the slots chosen so far in increasing order
    start = stack[-1] + 1 if stack else 0
    new_stack_count = len(stack) + 1
    for j in range(start, factor_count):
        slots = stack + (j,)
        yield slots
        if not bounded or new_stack_count < factor_count - 1:
            yield from _combination_slots(factor_count, bounded, slots)


def enumerate_combinations(factors: Sequence[Polynomial], bounded=False) -> List[FactorCombination]:
    """All non-empty combinations of factors by slot, in depth-first order

    Slots within a combination are strictly increasing, so each subset of
    slots appears exactly once. For [a, b, c] the order is
    a, ab, abc, ac, b, bc, c.

    Args:
        factors (list of Polynomial):
            Denominator factors (without constant factors).

        bounded (optional (bool)): (Default: False)
            If 'True', recursion stops at depth factor_count - 1. For two or
            more factors the combination of all factors is then never produced,
            which yields 2^n - 2 instead of 2^n - 1 combinations.

    Returns:
        (list of FactorCombination)
    """
    combinations = [FactorCombination(factors, slots) for slots in _combination_slots(len(factors), bounded)]
    LOG.debug("Enumerated " + str(len(combinations)) + " combinations of " + str(len(factors)) + " factors.")
    return combinations


def expand(combination: FactorCombination) -> Polynomial:
    """Product polynomial of the factors of a combination"""
    if len(combination.factors) == 0:
        raise EmptyFactorSetError()
    if len(combination.factors) == 1:
        return combination.factors[0].copy()
    return reduce(multiply, combination.factors[1:], combination.factors[0])


def expand_all(combinations: Sequence[FactorCombination]) -> List[Polynomial]:
    return [expand(c) for c in combinations]


def dedup(combinations: Sequence[FactorCombination],
          polynomials: Sequence[Polynomial]) -> Tuple[List[FactorCombination], List[Polynomial]]:
    """Keep the last of each group of combinations that expand to equal polynomials

    A combination is dropped if a later one expands to an equal polynomial, so
    each survivor sits at the position of its last occurrence. In depth-first
    order the extensions of a combination, such as (x-5)(x-5) for (x-5),
    then precede the surviving combination.

    Args:
        combinations (list of FactorCombination):
            Factor combinations.

        polynomials (list of Polynomial):
            The expanded polynomial of each combination, in the same order.

    Returns:
        (Tuple):
        The surviving combinations and their polynomials, in the original order.
    """
    if len(combinations) != len(polynomials):
        raise MismatchedListLengthError(len(combinations), len(polynomials))
    kept_combinations = []
    kept_polynomials = []
    for i, (combination, polynomial) in enumerate(zip(combinations, polynomials)):
        if any(equal(polynomial, p) for p in polynomials[i + 1:]):
            continue
        kept_combinations.append(combination)
        kept_polynomials.append(polynomial)
    LOG.debug("Removed " + str(len(polynomials) - len(kept_polynomials)) + " duplicate combinations.")
    return kept_combinations, kept_polynomials


def complement(denominator: Sequence[Polynomial], combination: FactorCombination) -> FactorCombination:
    """Factors of the denominator that remain after removing those of a combination

    Every factor of the combination consumes one denominator slot of equal
    value, its own slot if that one matches. Further slots of the same value
    stay in the complement, e.g. removing (x-5) from x(x-5)(x-5)(x-5) leaves
    x(x-5)(x-5).
    """
    used = [False] * len(denominator)
    for slot, factor in zip(combination.slots, combination.factors):
        if slot < len(denominator) and not used[slot] and equal(denominator[slot], factor):
            used[slot] = True
            continue
        match = next((j for j, d in enumerate(denominator) if not used[j] and equal(d, factor)), None)
        if match is None:
            raise ValueError("Factor (" + str(factor) + ") of " + repr(combination) + " does not occur in the denominator.")
        used[match] = True
    return FactorCombination(denominator, [j for j in range(len(denominator)) if not used[j]])
