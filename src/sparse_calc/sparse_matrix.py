import numpy as np
import pandas as pd
from scipy import sparse
from dataclasses import dataclass, field

from .constants import ROWS_LABEL, COLS_LABEL, ELEMENT_FORMAT
from .matrix_errors import DimensionMismatchError



@dataclass
class SparseMatrix:
    """
    Integer sparse matrix backed by a dict of (row, col) -> value.

    Only explicitly written coordinates are stored; every other coordinate reads
    back as 0. Explicitly written zeros are kept, so a stored entry and an absent
    one differ at the storage level but not in value. The declared dimensions
    grow whenever a coordinate outside them is written and never shrink.
    """

    rows: int = 0
    cols: int = 0
    data_store: dict[tuple[int, int], int] = field(default_factory=dict)

    @classmethod
    def from_file(cls, matrix_file_path: str) -> 'SparseMatrix':
        """Load a matrix from a text file in rows=/cols= format.

        Args:
            matrix_file_path: Path to the matrix file.

        Returns:
            The parsed matrix.

        Raises:
            MatrixNotFoundError: If the file cannot be opened.
            MatrixFormatError: If a header or element line is malformed.
        """
        from .matrix_io import load_matrix
        return load_matrix(matrix_file_path)

    def save_to_file(self, file_path: str) -> None:
        """Write the matrix to file_path, raising MatrixWriteError if it cannot be opened."""
        from .matrix_io import save_matrix
        save_matrix(self, file_path)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def get_element(self, row: int, col: int) -> int:
        """Get the value at (row, col), 0 if it was never set."""
        return self.data_store.get((row, col), 0)

    def set_element(self, row: int, col: int, value: int) -> None:
        """Set the value at (row, col), growing the declared dimensions if needed."""
        if row >= self.rows:
            self.rows = row + 1
        if col >= self.cols:
            self.cols = col + 1
        self.data_store[(row, col)] = value

    def add(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Element-wise sum of two matrices with identical dimensions.

        Args:
            other: Right-hand operand.

        Returns:
            New matrix; coordinates whose sum is 0 remain stored.

        Raises:
            DimensionMismatchError: If the dimensions differ.
        """
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatchError("addition", self.shape, other.shape)

        result = self._copy_into_new()
        for (i, j), v in other.items():
            result.set_element(i, j, result.get_element(i, j) + v)
        return result

    def subtract(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Element-wise difference self - other of two matrices with identical dimensions.

        Raises:
            DimensionMismatchError: If the dimensions differ.
        """
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatchError("subtraction", self.shape, other.shape)

        result = self._copy_into_new()
        for (i, j), v in other.items():
            result.set_element(i, j, result.get_element(i, j) - v)
        return result

    def multiply(self, other: 'SparseMatrix') -> 'SparseMatrix':
        """Matrix product self @ other.

        Walks the stored entries of self only; for each entry (i, k) every column of
        other is probed at row k, and non-zero products are accumulated into (i, j).

        Args:
            other: Right-hand operand, with as many rows as self has columns.

        Returns:
            New matrix of shape (self.rows, other.cols).

        Raises:
            DimensionMismatchError: If self.cols != other.rows.
        """
        if self.cols != other.rows:
            raise DimensionMismatchError("multiplication", self.shape, other.shape)

        result = SparseMatrix(self.rows, other.cols)
        for (i, k), v in self.items():
            for j in range(other.cols):
                other_value = other.get_element(k, j)
                if other_value != 0:
                    result.set_element(i, j, result.get_element(i, j) + v * other_value)
        return result

    def _copy_into_new(self) -> 'SparseMatrix':
        result = SparseMatrix(self.rows, self.cols)
        for (i, j), v in self.items():
            result.set_element(i, j, v)
        return result

    def to_string(self) -> str:
        """Render the matrix in the rows=/cols= text format, one (row, col, value) line per stored entry."""
        lines = [f"{ROWS_LABEL}{self.rows}\n", f"{COLS_LABEL}{self.cols}\n"]
        for (i, j), v in self.items():
            lines.append(ELEMENT_FORMAT.format(row=i, col=j, value=v))
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def is_equal(self, other: 'SparseMatrix') -> bool:
        """Compare declared dimensions and effective values; a stored 0 equals an absent entry."""
        if self.shape != other.shape:
            return False
        for key in set(self.data_store) | set(other.data_store):
            if self.get_element(*key) != other.get_element(*key):
                return False
        return True

    def __getitem__(self, key) -> int:
        """m[i, j] is get_element(i, j): never-set and explicitly zeroed coordinates both read 0."""
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
        else:
            raise KeyError("SparseMatrix indices must be a tuple of length 2")
        return self.get_element(i, j)

    def __setitem__(self, key, value: int) -> None:
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
        else:
            raise KeyError("SparseMatrix indices must be a tuple of length 2")
        self.set_element(i, j, value)

    def __contains__(self, key) -> bool:
        """True if position (i, j) is stored, even when its value is 0."""
        if isinstance(key, tuple) and len(key) == 2:
            return key in self.data_store
        return False

    def __len__(self) -> int:
        """Returns the number of stored elements, explicit zeros included."""
        return len(self.data_store)

    def __iter__(self):
        """Iterates over stored positions in row-major order."""
        return iter(self.keys())

    def keys(self) -> list[tuple[int, int]]:
        return sorted(self.data_store.keys())

    def values(self) -> list[int]:
        return [v for _, v in self.items()]

    def items(self) -> list[tuple[tuple[int, int], int]]:
        """Returns a list of (key, value) pairs in row-major order."""
        return sorted(self.data_store.items())

    def __add__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        return self.add(other)

    def __sub__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        return self.subtract(other)

    def __matmul__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        return self.multiply(other)

    def __repr__(self) -> str:
        """String representation of the matrix."""
        items_str = ", ".join(f"{k}: {v}" for k, v in self.items())
        return f"SparseMatrix(rows={self.rows}, cols={self.cols}, {{{items_str}}})"

    def copy(self) -> 'SparseMatrix':
        """Returns a copy of the matrix."""
        return SparseMatrix(self.rows, self.cols, self.data_store.copy())

    def _check_exportable(self) -> None:
        # negative coordinates never grow the dimensions and would wrap around in numpy
        for i, j in self.data_store:
            if i < 0 or j < 0:
                raise ValueError(f"Cannot export matrix with negative coordinate ({i}, {j})")

    def to_dense(self) -> np.ndarray:
        """Export to a dense int64 array of shape (rows, cols).

        Raises:
            ValueError: If a negative coordinate is stored.
        """
        self._check_exportable()
        dense = np.zeros((max(self.rows, 0), max(self.cols, 0)), dtype=np.int64)
        for (i, j), v in self.data_store.items():
            dense[i, j] = v
        return dense

    def to_scipy(self) -> sparse.coo_matrix:
        """Export to a scipy COO matrix. Explicit zeros are kept as stored entries."""
        self._check_exportable()
        keys = self.keys()
        row = np.fromiter((k[0] for k in keys), dtype=np.int64, count=len(keys))
        col = np.fromiter((k[1] for k in keys), dtype=np.int64, count=len(keys))
        data = np.fromiter((self.data_store[k] for k in keys), dtype=np.int64, count=len(keys))
        return sparse.coo_matrix((data, (row, col)), shape=(max(self.rows, 0), max(self.cols, 0)))

    @classmethod
    def from_scipy(cls, matrix) -> 'SparseMatrix':
        """Build a matrix from any scipy sparse matrix; duplicate coordinates are summed first."""
        coo = sparse.coo_matrix(matrix)
        coo.sum_duplicates()
        n_rows, n_cols = coo.shape
        result = cls(int(n_rows), int(n_cols))
        for i, j, v in zip(coo.row, coo.col, coo.data):
            result.set_element(int(i), int(j), int(v))
        return result

    def to_frame(self) -> pd.DataFrame:
        """Stored entries as a DataFrame with columns row, col, value in row-major order."""
        records = [(i, j, v) for (i, j), v in self.items()]
        return pd.DataFrame(records, columns=['row', 'col', 'value'], dtype=np.int64)
