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
"""Linear system relating candidate terms to the numerator (LinearSystem)"""

from typing import Sequence
import numpy as np
from partialfrac.numerator_powers import CandidateTerm
from partialfrac.polynomial import Polynomial, effective_degree_count


def make_matrix(candidates: Sequence[CandidateTerm], numerator: Polynomial) -> np.ndarray:
    """Augmented coefficient matrix of the partial fraction identity

    Row y is the equation for the coefficient of x^y. Column x < len(candidates)
    holds the coefficients of candidate x, the last column holds the numerator.
    Coefficients beyond the length of a polynomial are zero.

    The matrix has one row per numerator coefficient. If a candidate has more
    significant coefficients than the numerator, rows are added so that its
    leading coefficients are not cut off. The height is then larger than the
    numerator's coefficient count, and the added rows have a zero right hand
    side. This only happens for flat candidates, numerator power candidates
    never exceed the numerator length.
    """
    height = max([len(numerator)] + [effective_degree_count(c.polynomial) for c in candidates])
    width = len(candidates) + 1
    matrix = np.zeros((height, width))
    for x, candidate in enumerate(candidates):
        coefs = candidate.polynomial.coefs[:height]
        matrix[:len(coefs), x] = coefs
    matrix[:len(numerator), -1] = numerator.coefs
    return matrix


class LinearSystem(object):
    """Augmented matrix together with the candidates of its columns

    Args:
        candidates (list of CandidateTerm):
            Unknowns of the system, one column each.

        numerator (Polynomial):
            Right hand side.
    """

    def __init__(self, candidates: Sequence[CandidateTerm], numerator: Polynomial):
        self.candidates = list(candidates)
        self.numerator = numerator
        self.matrix = make_matrix(self.candidates, numerator)

    @property
    def width(self) -> int:
        return self.matrix.shape[1]

    @property
    def height(self) -> int:
        return self.matrix.shape[0]

    @property
    def candidate_count(self) -> int:
        return len(self.candidates)

    def __repr__(self):
        return "LinearSystem(" + str(self.height) + " equations, " + str(self.candidate_count) + " candidates)"
