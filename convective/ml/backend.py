"""Compute backend abstraction for the model layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

import numpy as np


class BackendError(Exception):
    """A backend operation failed: I/O, JSON or tensor shape problems."""


class ShapeError(BackendError):
    """A tensor does not have the shape an operation needs."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"shape mismatch: {message}")


class ComputeBackend(ABC):
    """Construction helpers and shape inspection for one tensor type."""

    @staticmethod
    @abstractmethod
    def from_row_vecs(data):
        """Build a matrix tensor from row-major nested sequences."""

    @staticmethod
    @abstractmethod
    def from_slice(data):
        """Build a column-vector tensor from a flat sequence."""

    @staticmethod
    @abstractmethod
    def shape_info(tensor) -> str:
        """Human-readable description of a tensor's shape."""


class NumpyBackend(ComputeBackend):
    """Default backend holding tensors as two-dimensional float64 arrays."""

    @staticmethod
    def from_row_vecs(data: Iterable[Sequence[float]]) -> np.ndarray:
        """An (n, m) matrix from n rows of m values each."""
        rows = [list(row) for row in data]
        cols = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != cols:
                raise ShapeError(
                    f"row {index} has {len(row)} values, expected {cols}"
                )
        return np.array(rows, dtype=np.float64).reshape(len(rows), cols)

    @staticmethod
    def from_slice(data: Iterable[float]) -> np.ndarray:
        """An (n, 1) column vector from n values."""
        values = np.asarray(list(data), dtype=np.float64)
        if values.ndim != 1:
            raise ShapeError("expected a flat sequence of values")
        return values.reshape(-1, 1)

    @staticmethod
    def shape_info(tensor: np.ndarray) -> str:
        """The shape written as ``(rows, cols)``."""
        return "(" + ", ".join(str(dim) for dim in np.shape(tensor)) + ")"