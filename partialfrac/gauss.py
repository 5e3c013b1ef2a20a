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
"""Gauss-Jordan elimination on float matrices (Gauss)

Reduces an augmented matrix to reduced row echelon form (RREF) and reads the
solution off the leading ones. Values below the tolerance count as zero.
"""

import logging
import numpy as np
from partialfrac.errors import DecompositionInconsistentError
from partialfrac.names import TOLERANCE

LOG = logging.getLogger(__name__)


class Gauss:
    """
    Gaussian elimination with tolerance based zero detection.

    Pivots are chosen per column as the entry with the smallest magnitude
    above the tolerance, which keeps the factor the pivot row is scaled with
    small. This is not the largest-magnitude rule usually recommended for
    floating point elimination.
    """

    def __init__(self, tolerance: float = TOLERANCE):
        """
        Args:
            tolerance: Magnitude below which a value is treated as zero
        """
        self.tolerance = tolerance

    _instance = None

    @classmethod
    def get_instance(cls) -> 'Gauss':
        """Shared instance using the package tolerance"""
        if cls._instance is None:
            cls._instance = cls(TOLERANCE)
        return cls._instance

    def _is_zero(self, value) -> bool:
        return abs(value) < self.tolerance

    def rank(self, matrix: np.ndarray) -> int:
        """Rank of the matrix, computed on a copy"""
        return self.rref(np.array(matrix, dtype=float))

    def rref(self, matrix: np.ndarray) -> int:
        """
        Reduce matrix to reduced row echelon form in place.

        Columns without an entry above tolerance at or below the current row
        are skipped, they belong to free variables. Elimination ends when
        every row holds a pivot or every column has been visited.

        Args:
            matrix: Two-dimensional float array, modified in place

        Returns:
            The number of pivots (rank)
        """
        rows, cols = matrix.shape
        current_row = 0
        for col in range(cols):
            if current_row >= rows:
                break
            pivot_row = self._find_pivot_row(matrix, current_row, col)
            if pivot_row == -1:
                continue
            # entries left of col are zero in the pivot row
            matrix[pivot_row, col:] /= matrix[pivot_row, col]
            matrix[pivot_row, col] = 1.0
            self._eliminate_column(matrix, pivot_row, col)
            if pivot_row != current_row:
                matrix[[current_row, pivot_row]] = matrix[[pivot_row, current_row]]
            current_row += 1
        return current_row

    def _find_pivot_row(self, matrix: np.ndarray, start_row: int, col: int) -> int:
        """
        Row of the smallest entry above tolerance in column col, from start_row on.

        Returns:
            Row index of the pivot, or -1 if the column has no such entry
        """
        best_row = -1
        best_value = np.inf
        for row in range(start_row, matrix.shape[0]):
            value = abs(matrix[row, col])
            if not self._is_zero(value) and value < best_value:
                best_value = value
                best_row = row
        return best_row

    def _eliminate_column(self, matrix: np.ndarray, pivot_row: int, col: int):
        """Subtract multiples of the (normalized) pivot row from all other rows"""
        others = np.arange(matrix.shape[0]) != pivot_row
        factors = matrix[others, col]
        matrix[others, col:] -= np.outer(factors, matrix[pivot_row, col:])
        matrix[others, col] = 0.0

    def extract_leading_values(self, matrix: np.ndarray, column_count: int) -> np.ndarray:
        """
        Read the solution of a system in RREF.

        Rows are scanned top to bottom. Within a row, columns are scanned from
        where the previous leading one was found, following the staircase of
        the RREF. The right hand side of a row becomes the value of the column
        holding its leading one. Columns without a leading one stay zero.

        Args:
            matrix: Augmented matrix in RREF, the last column being the right hand side
            column_count: Number of unknowns (columns left of the right hand side)

        Returns:
            Array with one value per unknown

        Raises:
            DecompositionInconsistentError: If a row without leading one has a
                right hand side that is not zero
        """
        values = np.zeros(column_count)
        x = 0
        for y in range(matrix.shape[0]):
            row_end = matrix[y, -1]
            x = self._leading_one(matrix[y], x, column_count)
            if x < column_count:
                values[x] = row_end
            elif not self._is_zero(row_end):
                LOG.debug("Equation " + str(y) + " cannot be satisfied (residual " + format(row_end, 'g') + ").")
                raise DecompositionInconsistentError(y, row_end)
        return values

    def _leading_one(self, row: np.ndarray, start: int, column_count: int) -> int:
        for x in range(start, column_count):
            if self._is_zero(row[x] - 1):
                return x
        return column_count
