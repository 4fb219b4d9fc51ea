"""Numeric data matrices sent to gnuplot as little-endian binary records."""

from __future__ import annotations

import numbers
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_MIN_COLUMNS = 2
_MAX_COLUMNS = 5


def to_float(value: object) -> float:
    """Convert a plottable number to a float."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"cannot plot value of type {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class Matrix:
    """Rows of scaled floating point data, all of the same width."""

    rows: tuple[tuple[float, ...], ...]
    ncols: int

    @property
    def nrows(self) -> int:
        return len(self.rows)

    def to_bytes(self) -> bytes:
        """Return the rows packed as consecutive little-endian doubles."""
        flat = [value for row in self.rows for value in row]
        return struct.pack(f"<{len(flat)}d", *flat)


def build_matrix(rows: Iterable[Sequence[object]], scale: Sequence[float]) -> Matrix:
    """Build a matrix, multiplying each column by its scale factor."""
    factors = tuple(to_float(factor) for factor in scale)
    ncols = len(factors)
    if not _MIN_COLUMNS <= ncols <= _MAX_COLUMNS:
        raise ValueError(
            f"a matrix must have between {_MIN_COLUMNS} and {_MAX_COLUMNS} columns"
        )

    scaled = []
    for row in rows:
        values = tuple(row)
        if len(values) != ncols:
            raise ValueError(f"expected a row of {ncols} values, got {len(values)}")
        scaled.append(
            tuple(to_float(value) * factor for value, factor in zip(values, factors))
        )
    return Matrix(rows=tuple(scaled), ncols=ncols)