"""Small dense matrices of floats with bounds-checked access."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

try:
    __version__ = _dist_version("pydense")
except PackageNotFoundError:
    __version__ = "unknown"

from ._internal.dense import Matrix
from ._internal.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidShapeError,
    OutOfRangeError,
    PyDenseError,
)
from ._internal.export import export_to_numpy as _export_to_numpy
from ._internal.factories import identity, matrix, zeros
from ._internal.runtime import (
    Settings,
    configure,
    get_settings,
    reload_settings,
    settings_override,
)
from ._internal.warnings import (
    PyDenseConfigWarning,
    PyDensePerformanceWarning,
    PyDenseWarning,
)


def to_numpy(obj: Matrix, *, dtype=None):
    """Return a fresh 2-D NumPy array holding the values of `obj`."""
    return _export_to_numpy(obj, dtype=dtype)


__all__ = [
    "Matrix",
    "matrix",
    "zeros",
    "identity",
    "to_numpy",
    "PyDenseError",
    "InvalidArgumentError",
    "InvalidShapeError",
    "DimensionMismatchError",
    "OutOfRangeError",
    "PyDenseWarning",
    "PyDensePerformanceWarning",
    "PyDenseConfigWarning",
    "Settings",
    "configure",
    "get_settings",
    "reload_settings",
    "settings_override",
]
