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
"""Exceptions raised during partial fraction decomposition"""

from partialfrac.names import INCONSISTENT


class PartialFractionError(Exception):
    """Base class of all errors raised by partialfrac"""


class EmptyFactorSetError(PartialFractionError, ValueError):
    """A factor combination without any factor was expanded.

    Enumeration only produces non-empty combinations, so this points to a
    programming error in the caller.
    """

    def __init__(self, message="Cannot expand a factor combination with no factors"):
        super().__init__(message)


class MismatchedListLengthError(PartialFractionError, ValueError):
    """Combination and polynomial lists passed side by side differ in length"""

    def __init__(self, combination_count, polynomial_count):
        self.combination_count = combination_count
        self.polynomial_count = polynomial_count
        super().__init__("Got " + str(combination_count) + " factor combinations but " + str(polynomial_count) +
                         " expanded polynomials.")


class DecompositionInconsistentError(PartialFractionError, ArithmeticError):
    """No partial fraction decomposition exists for the current candidate basis.

    Raised when a row of the reduced system has no leading one among the
    candidate columns while its right hand side is not zero.

    Args:
        row (int):
            Index of the first inconsistent row of the reduced matrix.

        residual (float):
            Right hand side value of that row.
    """
    status = INCONSISTENT

    def __init__(self, row, residual):
        self.row = row
        self.residual = residual
        super().__init__("Can't find the partial fraction decomposition: equation " + str(row) +
                         " leaves the residual " + format(residual, 'g') + ".")
