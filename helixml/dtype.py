"""Element data types for tensors."""

from __future__ import annotations

from enum import Enum


class DType(Enum):
    """Element type of a tensor; the value is its short display name."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F16 = "f16"
    F32 = "f32"
    F64 = "f64"
    BOOL = "bool"
    C32 = "c32"
    C64 = "c64"

    def size_bytes(self) -> int:
        """Size in bytes of one element."""
        return _SIZES[self]

    def is_float(self) -> bool:
        return self in _FLOATS

    def is_int(self) -> bool:
        return self in _INTS

    def is_complex(self) -> bool:
        return self in _COMPLEX

    @classmethod
    def default_float(cls) -> DType:
        return cls.F32

    @classmethod
    def default_int(cls) -> DType:
        return cls.I32

    def __str__(self) -> str:
        return self.value


_SIZES = {
    DType.I8: 1, DType.U8: 1, DType.BOOL: 1,
    DType.I16: 2, DType.U16: 2, DType.F16: 2,
    DType.I32: 4, DType.U32: 4, DType.F32: 4, DType.C32: 4,
    DType.I64: 8, DType.U64: 8, DType.F64: 8, DType.C64: 8,
}
_FLOATS = frozenset({DType.F16, DType.F32, DType.F64})
_INTS = frozenset({
    DType.I8, DType.I16, DType.I32, DType.I64,
    DType.U8, DType.U16, DType.U32, DType.U64,
})
_COMPLEX = frozenset({DType.C32, DType.C64})