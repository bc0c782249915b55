import pytest

from helixml.errors import (
    AllocationFailedError,
    BackendError,
    DeviceMismatchError,
    DTypeMismatchError,
    InvalidDimensionError,
    SerializationError,
    ShapeMismatchError,
    TensorError,
    UnsupportedOperationError,
)


def test_shape_mismatch_keeps_fields_and_message():
    err = ShapeMismatchError([2, 3], [4])
    assert err.expected == [2, 3]
    assert err.actual == [4]
    assert str(err).startswith("Shape mismatch: expected")
    assert isinstance(err, TensorError)


def test_invalid_dimension_fields():
    err = InvalidDimensionError(5, (1, 2))
    assert err.dim == 5
    assert err.shape == [1, 2]
    assert "out of bounds for shape" in str(err)


def test_device_and_dtype_mismatch_mention_both_sides():
    dev = DeviceMismatchError("cpu", "cuda:0")
    assert "cpu" in str(dev) and "cuda:0" in str(dev)
    dt = DTypeMismatchError("f32", "i8")
    assert str(dt).startswith("DType mismatch")
    assert dt.actual == "i8"


@pytest.mark.parametrize(
    "factory, prefix",
    [
        (UnsupportedOperationError, "Operation not supported: "),
        (AllocationFailedError, "Memory allocation failed: "),
        (BackendError, "Backend error: "),
        (SerializationError, "Serialization error: "),
    ],
)
def test_single_field_errors(factory, prefix):
    err = factory("boom")
    assert str(err) == prefix + "boom"
    with pytest.raises(TensorError):
        raise err