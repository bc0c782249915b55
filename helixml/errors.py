"""Exceptions raised by tensor shape, device and dtype operations."""

from __future__ import annotations

from collections.abc import Sequence


class TensorError(Exception):
    """Base class for every tensor operation error."""


class ShapeMismatchError(TensorError):
    """Two shapes that had to agree did not."""

    def __init__(self, expected: Sequence[int], actual: Sequence[int]) -> None:
        self.expected = list(expected)
        self.actual = list(actual)
        super().__init__(f"Shape mismatch: expected {self.expected}, got {self.actual}")


class InvalidDimensionError(TensorError):
    """A dimension index lies outside a shape."""

    def __init__(self, dim: int, shape: Sequence[int]) -> None:
        self.dim = dim
        self.shape = list(shape)
        super().__init__(
            f"Invalid dimension: {dim} is out of bounds for shape {self.shape}"
        )


class DeviceMismatchError(TensorError):
    """Operands live on different devices."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Device mismatch: expected {expected!r}, got {actual!r}")


class DTypeMismatchError(TensorError):
    """Operands have different data types."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"DType mismatch: expected {expected!r}, got {actual!r}")


class UnsupportedOperationError(TensorError):
    """The requested operation is not supported."""

    def __init__(self, op: str) -> None:
        self.op = op
        super().__init__(f"Operation not supported: {op}")


class AllocationFailedError(TensorError):
    """Memory for a tensor could not be allocated."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Memory allocation failed: {reason}")


class BackendError(TensorError):
    """A compute backend reported a failure."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Backend error: {message}")


class SerializationError(TensorError):
    """A tensor could not be serialized or deserialized."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Serialization error: {message}")