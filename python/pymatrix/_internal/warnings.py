"""PyMatrix warning categories.

These exist so users can filter/suppress PyMatrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class PyMatrixWarning(UserWarning):
    """Base warning category for all PyMatrix user-facing warnings."""


class PyMatrixDTypeWarning(PyMatrixWarning):
    """Warnings about dtype width changes when mapping foreign dtypes."""
