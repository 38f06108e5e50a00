import pytest

import pymatrix
from pymatrix import BuilderConsumedError, Matrix, MatrixBuilder, ShapeError


def test_finalize_produces_zero_filled_matrix():
    m = MatrixBuilder().set_columns(3).set_rows(2).finalize()
    assert isinstance(m, Matrix)
    assert m.cols() == 3
    assert m.rows() == 2
    assert len(m.elements) == 6
    assert all(v == 0 for v in m.elements)


def test_setters_chain_and_overwrite():
    b = MatrixBuilder()
    assert b.set_columns(5) is b
    assert b.set_rows(5) is b
    b.set_columns(2).set_rows(4)
    assert (b.column_count, b.row_count) == (2, 4)
    assert b.finalize().shape == (4, 2)


def test_set_cols_alias():
    m = MatrixBuilder().set_cols(3).set_rows(3).finalize()
    assert m.is_square()


@pytest.mark.parametrize(
    ("cols", "rows", "message"),
    [
        (0, 2, "columns cannot be zero"),
        (2, 0, "rows cannot be zero"),
        (0, 0, "columns cannot be zero"),
    ],
)
def test_zero_dimension_rejected(cols, rows, message):
    b = MatrixBuilder().set_columns(cols).set_rows(rows)
    with pytest.raises(ShapeError) as exc:
        b.finalize()
    assert message in str(exc.value)


def test_default_builder_is_incomplete():
    with pytest.raises(ShapeError):
        MatrixBuilder().finalize()


def test_failed_finalize_does_not_consume():
    b = MatrixBuilder().set_rows(2)
    with pytest.raises(ShapeError):
        b.finalize()
    assert not b.consumed
    m = b.set_columns(2).finalize()
    assert m.shape == (2, 2)


def test_builder_is_single_use():
    b = MatrixBuilder().set_columns(1).set_rows(1)
    b.finalize()
    assert b.consumed
    with pytest.raises(BuilderConsumedError):
        b.finalize()
    with pytest.raises(BuilderConsumedError):
        b.set_rows(3)
    with pytest.raises(RuntimeError):
        b.set_elements([[1]])


def test_negative_dimension_is_value_error():
    with pytest.raises(ValueError):
        MatrixBuilder().set_columns(-1).set_rows(2).finalize()


def test_staged_elements():
    m = (
        MatrixBuilder()
        .set_columns(2)
        .set_rows(2)
        .set_dtype("int")
        .set_elements([[1, 2], [3, 4]])
        .finalize()
    )
    assert m.dtype is pymatrix.int64
    assert m.to_list() == [[1, 2], [3, 4]]


def test_staged_elements_shape_mismatch():
    b = MatrixBuilder().set_columns(3).set_rows(2).set_elements([[1, 2], [3, 4]])
    with pytest.raises(ShapeError) as exc:
        b.finalize()
    assert "expected (2, 3)" in str(exc.value)
    assert not b.consumed


def test_ragged_staged_elements():
    b = MatrixBuilder().set_columns(2).set_rows(2).set_elements([[1, 2], [3]])
    with pytest.raises(ShapeError):
        b.finalize()


def test_unknown_dtype_rejected_at_finalize():
    b = MatrixBuilder().set_columns(1).set_rows(1).set_dtype("quaternion")
    with pytest.raises(TypeError):
        b.finalize()


def test_repr_shows_state():
    b = MatrixBuilder().set_columns(2).set_rows(3)
    assert "columns=2" in repr(b)
    assert "staged" in repr(b)
    b.finalize()
    assert "consumed" in repr(b)
