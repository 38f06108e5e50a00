"""PyMatrix exception hierarchy.

Each error also derives from the builtin a caller would naturally catch
(IndexError for bad coordinates, ValueError for bad shapes), so existing
``except IndexError`` code keeps working.
"""


class PyMatrixError(Exception):
    """Base class for all PyMatrix errors."""


class OutOfBounds(PyMatrixError, IndexError):
    """A coordinate falls outside the matrix's declared extent."""

    def __init__(self, row: int, col: int, shape: tuple[int, int]):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(f"index ({row}, {col}) is out of bounds for matrix of shape {shape}")


class ShapeError(PyMatrixError, ValueError):
    """The matrix shape violates an operation's precondition."""


class BuilderConsumedError(PyMatrixError, RuntimeError):
    """A MatrixBuilder was used after a successful finalize()."""
