"""
Dense two-dimensional matrix value type.

Storage is a single row-major Python list of rows * cols cells. Cells are
arbitrary Python objects supporting the arithmetic each operation needs
(float by default; int, Fraction, Decimal and complex all work).

Every non-mutating operation returns a fresh Matrix that owns its own
buffer. In-place operators validate their preconditions before touching
the buffer, so a failed call leaves the operand unchanged.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator, Sequence
from typing import Any, TextIO

import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import ShapeMismatchError, InvalidShapeError
from densematrix.core.protocols import (
    ElementTransform,
    ElementType,
    RandomSource,
)
from densematrix.core.tolerances import select_tolerance
from densematrix.core.validation import (
    check_index,
    check_inner_dims,
    check_same_shape,
    check_slice_bounds,
)
from densematrix.matrix._common import Shape, parse_extent
from densematrix.matrix._debug import write_dump
from densematrix.matrix.random import resolve_source, uniform_samples

logger = logging.getLogger(__name__)

# Slice bound meaning "use the default for this side"; not a reverse index.
SLICE_DEFAULT = -1


def _is_scalar(value: object) -> bool:
    return not isinstance(value, (Matrix, RowView, Sequence, np.ndarray))


def _resolve_bound(value: object, default: int, name: str) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise TypeError(f"slice {name}: expected int or None, got bool")
    bound = operator.index(value)
    return default if bound == SLICE_DEFAULT else bound


class RowView(Sequence):
    """
    Live, fixed-length view of one matrix row.

    Reads and writes go straight to the owning matrix's buffer. A view
    is invalidated by resize(); accessing it afterwards re-checks the
    row index against the current shape.
    """

    __slots__ = ('_matrix', '_row')

    def __init__(self, matrix: Matrix, row: int):
        self._matrix = matrix
        self._row = row

    def _offset(self, col: object) -> int:
        m = self._matrix
        row = check_index(self._row, m._rows, 'row')
        return row * m._cols + check_index(col, m._cols, 'col')

    def __len__(self) -> int:
        return self._matrix._cols

    def __getitem__(self, col):
        return self._matrix._data[self._offset(col)]

    def __setitem__(self, col, value) -> None:
        self._matrix._data[self._offset(col)] = value

    def __iter__(self) -> Iterator[Any]:
        m = self._matrix
        start = check_index(self._row, m._rows, 'row') * m._cols
        return iter(m._data[start:start + m._cols])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (RowView, Sequence)) and not isinstance(other, (str, bytes)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"RowView({list(self)!r})"


class Matrix:
    """
    Dense rows x cols matrix.

    Construction:
        Matrix()                 -> shape (0, 0)
        Matrix(n, m)             -> every cell dtype(0)
        Matrix(n, m, f)          -> cell (i, j) = f(i, j)
        Matrix(shape)            -> same as Matrix(*shape)
        Matrix(shape, f)         -> same as Matrix(*shape, f)

    Args:
        *args: One of the forms above
        dtype: Keyword-only element constructor. Zero is dtype(0), one is
            dtype(1), random samples are converted with dtype(sample).
            A callable passed positionally is taken as the generator f,
            so write Matrix(n, m, dtype=int), not Matrix(n, m, int).

    Raises:
        InvalidShapeError: On negative or non-integer dimensions, a shape
            that is not rank 2, or a generator given without dimensions

    Operators:
        A + B, A - B, -A            cellwise, equal shapes required
        A * k, k * A                scalar multiplication
        A * B, A @ B                matrix product, A.cols == B.rows
        A.hadamard(B)               cellwise product
        +=, -=, *=, @=, hadamard_   in-place forms of the above
        A == B                      exact equality of shape and cells

    Examples:
        >>> A = Matrix(2, 2, lambda i, j: i * 2 + j + 1, dtype=int)
        >>> A.tolist()
        [[1, 2], [3, 4]]
        >>> (A * A).tolist()
        [[7, 10], [15, 22]]
    """

    __slots__ = ('_rows', '_cols', '_data', '_dtype')

    # Keep numpy from broadcasting over a Matrix operand
    __array_ufunc__ = None

    __hash__ = None

    def __init__(self, *args: Any, dtype: ElementType = float):
        generator = None
        if args and callable(args[-1]):
            generator = args[-1]
            args = args[:-1]
            if not args:
                raise InvalidShapeError(
                    "Matrix: a generator needs dimensions, e.g. Matrix(n, m, f)"
                )
        shape = parse_extent(args, 'Matrix') or Shape(0, 0)

        self._rows, self._cols = shape
        self._dtype = dtype
        if generator is None:
            self._data = [dtype(0)] * (self._rows * self._cols)
        else:
            self._data = [
                generator(i, j) for i in range(self._rows) for j in range(self._cols)
            ]

    @classmethod
    def _from_buffer(
        cls, rows: int, cols: int, data: list[Any], dtype: ElementType
    ) -> Matrix:
        """Wrap an already-validated row-major buffer without copying."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        obj._dtype = dtype
        return obj

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Shape:
        return Shape(self._rows, self._cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        """Number of cells."""
        return self._rows * self._cols

    @property
    def dtype(self) -> ElementType:
        return self._dtype

    @property
    def T(self) -> Matrix:
        """Transpose."""
        return self.transpose()

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _cell(self, key: tuple) -> int:
        if len(key) != 2:
            raise TypeError(f"expected (row, col) index, got {len(key)} indices")
        i = check_index(key[0], self._rows, 'row')
        j = check_index(key[1], self._cols, 'col')
        return i * self._cols + j

    def __getitem__(self, key):
        """A[i] -> live RowView, A[i, j] -> cell value."""
        if isinstance(key, tuple):
            return self._data[self._cell(key)]
        return RowView(self, check_index(key, self._rows, 'row'))

    def __setitem__(self, key, value) -> None:
        """A[i, j] = v writes a cell; A[i] = seq replaces a whole row."""
        if isinstance(key, tuple):
            self._data[self._cell(key)] = value
            return
        i = check_index(key, self._rows, 'row')
        values = list(value)
        if len(values) != self._cols:
            raise ShapeMismatchError(
                f"row assignment: expected {self._cols} values, got {len(values)}",
                operation='row assignment',
                left_shape=(1, self._cols),
                right_shape=(1, len(values)),
            )
        self._data[i * self._cols:(i + 1) * self._cols] = values

    def row(self, i: int) -> tuple[Any, ...]:
        """Read-only copy of row i."""
        i = check_index(i, self._rows, 'row')
        return tuple(self._data[i * self._cols:(i + 1) * self._cols])

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        c = self._cols
        for i in range(self._rows):
            yield tuple(self._data[i * c:(i + 1) * c])

    def tolist(self) -> list[list[Any]]:
        """Nested-list copy of the cells."""
        c = self._cols
        return [self._data[i * c:(i + 1) * c] for i in range(self._rows)]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """
        Copy into a fresh (rows, cols) numpy array.

        Args:
            dtype: numpy dtype; None lets numpy infer it from the cells

        Returns:
            ndarray of shape (rows, cols)
        """
        return np.array(self._data, dtype=dtype).reshape(self._rows, self._cols)

    def copy(self) -> Matrix:
        """Independent copy with its own buffer."""
        return self._from_buffer(self._rows, self._cols, list(self._data), self._dtype)

    __copy__ = copy

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate equality within tolerance.

        Unspecified tolerances come from the tier for this matrix's
        dtype (see densematrix.core.tolerances). Matrices of different
        shapes are never close.
        """
        self._require_matrix(other, 'allclose')
        if self.shape != other.shape:
            return False
        tier = select_tolerance(self._dtype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        target = np.complex128 if complex in (self._dtype, other._dtype) else np.float64
        return bool(np.allclose(
            np.asarray(self._data, dtype=target),
            np.asarray(other._data, dtype=target),
            rtol=rtol,
            atol=atol,
        ))

    def __repr__(self) -> str:
        if self.size == 0:
            return f"Matrix(shape=({self._rows}, {self._cols}))"
        return f"Matrix({self.tolist()!r})"

    def debug(self, sink: TextIO | None = None) -> None:
        """
        Write a diagnostic dump when debugging is enabled.

        Enable with densematrix.set_debug(True), the debug_mode() context
        manager, or DENSEMATRIX_DEBUG=1 in the environment. Otherwise this
        is a no-op. The output format is not a stable interface.
        """
        write_dump(self, sink)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    @staticmethod
    def _require_matrix(other: object, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise TypeError(f"{operation}: expected Matrix, got {type(other).__name__}")

    def add(self, other: Matrix) -> Matrix:
        """Cellwise sum. Raises ShapeMismatchError unless shapes match."""
        self._require_matrix(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        data = [a + b for a, b in zip(self._data, other._data)]
        return self._from_buffer(self._rows, self._cols, data, self._dtype)

    def sub(self, other: Matrix) -> Matrix:
        """Cellwise difference. Raises ShapeMismatchError unless shapes match."""
        self._require_matrix(other, 'sub')
        check_same_shape(self.shape, other.shape, 'sub')
        data = [a - b for a, b in zip(self._data, other._data)]
        return self._from_buffer(self._rows, self._cols, data, self._dtype)

    def neg(self) -> Matrix:
        return self._from_buffer(
            self._rows, self._cols, [-a for a in self._data], self._dtype
        )

    def scale(self, k: Any) -> Matrix:
        """Multiply every cell by scalar k."""
        data = [a * k for a in self._data]
        return self._from_buffer(self._rows, self._cols, data, self._dtype)

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product.

        Result cells start at dtype(0) and accumulate in i-k-j order, which
        fixes the rounding path for inexact element types.

        Raises:
            ShapeMismatchError: If self.cols != other.rows
        """
        self._require_matrix(other, 'matmul')
        check_inner_dims(self.shape, other.shape, 'matmul')
        n, m, p = self._rows, self._cols, other._cols
        a, b = self._data, other._data
        out = [self._dtype(0)] * (n * p)
        for i in range(n):
            base = i * p
            for k in range(m):
                aik = a[i * m + k]
                brow = k * p
                for j in range(p):
                    out[base + j] = out[base + j] + aik * b[brow + j]
        return self._from_buffer(n, p, out, self._dtype)

    def hadamard(self, other: Matrix) -> Matrix:
        """Cellwise product. Raises ShapeMismatchError unless shapes match."""
        self._require_matrix(other, 'hadamard')
        check_same_shape(self.shape, other.shape, 'hadamard')
        data = [a * b for a, b in zip(self._data, other._data)]
        return self._from_buffer(self._rows, self._cols, data, self._dtype)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Matrix:
        return self.neg()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.matmul(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        data = [other * a for a in self._data]
        return self._from_buffer(self._rows, self._cols, data, self._dtype)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    # In-place forms mutate self and return it

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        data = self._data
        for idx, b in enumerate(list(other._data)):
            data[idx] = data[idx] + b
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'sub')
        data = self._data
        for idx, b in enumerate(list(other._data)):
            data[idx] = data[idx] - b
        return self

    def __imul__(self, other):
        if isinstance(other, Matrix):
            return self._assign_product(other)
        if not _is_scalar(other):
            return NotImplemented
        data = self._data
        for idx in range(len(data)):
            data[idx] = data[idx] * other
        return self

    def __imatmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._assign_product(other)

    def _assign_product(self, other: Matrix) -> Matrix:
        product = self.matmul(other)
        logger.debug(
            "in-place matmul %s x %s -> %s", self.shape, other.shape, product.shape
        )
        self._rows, self._cols, self._data = product._rows, product._cols, product._data
        return self

    def hadamard_(self, other: Matrix) -> Matrix:
        """In-place Hadamard product; returns self."""
        self._require_matrix(other, 'hadamard')
        check_same_shape(self.shape, other.shape, 'hadamard')
        data = self._data
        for idx, b in enumerate(list(other._data)):
            data[idx] = data[idx] * b
        return self

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def apply(self, f: ElementTransform) -> Matrix:
        """New matrix of the same shape with cells f(x)."""
        return self._from_buffer(
            self._rows, self._cols, [f(a) for a in self._data], self._dtype
        )

    def transpose(self) -> Matrix:
        """New (cols, rows) matrix with cell (j, i) = self[i, j]."""
        r, c = self._rows, self._cols
        data = [self._data[i * c + j] for j in range(c) for i in range(r)]
        return self._from_buffer(c, r, data, self._dtype)

    def slice(
        self,
        u: int | None = None,
        d: int | None = None,
        l: int | None = None,
        r: int | None = None,
    ) -> Matrix:
        """
        Copy of rows [u, d) and columns [l, r).

        None, or the legacy sentinel -1, selects the default bound for
        that side: u=0, d=rows, l=0, r=cols. -1 is never a reverse
        index; any other negative bound is rejected.

        Raises:
            OutOfBoundsError: Unless 0 <= u <= d <= rows and
                0 <= l <= r <= cols after resolution
        """
        top = _resolve_bound(u, 0, 'u')
        bottom = _resolve_bound(d, self._rows, 'd')
        left = _resolve_bound(l, 0, 'l')
        right = _resolve_bound(r, self._cols, 'r')
        check_slice_bounds(top, bottom, self._rows, 'row')
        check_slice_bounds(left, right, self._cols, 'col')

        c = self._cols
        data = [
            self._data[i * c + j]
            for i in range(top, bottom)
            for j in range(left, right)
        ]
        return self._from_buffer(bottom - top, right - left, data, self._dtype)

    def resize(self, *args: Any) -> None:
        """
        Change the shape in place: resize(n, m) or resize(shape).

        Cells inside both the old and new extents keep their values; new
        cells are dtype(0); cells outside the new extent are dropped.
        """
        shape = parse_extent(args, 'resize')
        if shape is None:
            raise InvalidShapeError("resize: expected (rows, cols) or (shape,)")
        self._resize(shape)

    def _resize(self, shape: Shape) -> None:
        if shape == self.shape:
            return
        old_r, old_c = self._rows, self._cols
        new_r, new_c = shape
        zero = self._dtype(0)
        old = self._data
        keep_c = min(old_c, new_c)
        data = []
        for i in range(new_r):
            if i < old_r:
                data.extend(old[i * old_c:i * old_c + keep_c])
                data.extend([zero] * (new_c - keep_c))
            else:
                data.extend([zero] * new_c)
        logger.debug("resize %s -> %s", (old_r, old_c), tuple(shape))
        self._rows, self._cols, self._data = new_r, new_c, data

    def randomized(
        self,
        *args: Any,
        rng: RandomSource | int | None = None,
    ) -> Matrix:
        """
        Fill with independent uniform samples on [-5.0, 5.0].

        Forms:
            randomized()          keep the current shape
            randomized(n, m)      resize to (n, m) first
            randomized(shape)     resize to shape first

        Args:
            rng: None for a fresh nondeterministically seeded generator,
                an int seed, or any RandomSource

        Returns:
            self

        Raises:
            ValueError: If the source returns the wrong number of samples;
                the matrix is left unchanged

        Note:
            Cells are dtype(sample); for dtype=int that truncates toward
            zero, giving integers in [-4, 4].
        """
        shape = parse_extent(args, 'randomized') or self.shape
        source = resolve_source(rng)
        samples = uniform_samples(source, shape.rows * shape.cols)
        data = [self._dtype(s) for s in samples]
        if shape != self.shape:
            logger.debug("resize %s -> %s", tuple(self.shape), tuple(shape))
        self._rows, self._cols, self._data = shape.rows, shape.cols, data
        logger.debug("randomized %s matrix", tuple(self.shape))
        return self
