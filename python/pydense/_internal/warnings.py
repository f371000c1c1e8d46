"""pydense warning categories.

These exist so users can filter/suppress pydense warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class PyDenseWarning(UserWarning):
    """Base warning category for all pydense user-facing warnings."""


class PyDensePerformanceWarning(PyDenseWarning):
    """Warnings about likely performance pitfalls (e.g., large pure-Python products)."""


class PyDenseConfigWarning(PyDenseWarning):
    """Warnings about unusable configuration values (the default is used instead)."""
