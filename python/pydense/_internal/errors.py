"""pydense exception types.

Two failure kinds stay distinguishable: shape problems are `ValueError`
subclasses, index problems are `IndexError` subclasses.

Keep this module dependency-free to avoid import cycles.
"""
from __future__ import annotations


class PyDenseError(Exception):
    """Base class for every error raised by pydense."""


class InvalidArgumentError(PyDenseError, ValueError):
    """A shape precondition was violated."""


class InvalidShapeError(InvalidArgumentError):
    """A matrix was requested with a non-positive dimension."""


class DimensionMismatchError(InvalidArgumentError):
    """Operand shapes are incompatible for the requested operation."""

    def __init__(self, op: str, left_shape: tuple[int, int], right_shape: tuple[int, int]):
        self.op = op
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(f"{op}: incompatible shapes {left_shape} and {right_shape}")


class OutOfRangeError(PyDenseError, IndexError):
    """An element index fell outside the matrix."""

    def __init__(self, op: str, index: tuple[int, int], shape: tuple[int, int]):
        self.op = op
        self.index = index
        self.shape = shape
        super().__init__(f"{op}: index {index} out of range for shape {shape}")
