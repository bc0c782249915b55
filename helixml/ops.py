"""Operation kinds and parameter records for tensor kernels."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


class BinaryOp(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    POW = auto()
    MAX = auto()
    MIN = auto()
    EQ = auto()
    NE = auto()
    LT = auto()
    LE = auto()
    GT = auto()
    GE = auto()


class UnaryOp(Enum):
    NEG = auto()
    ABS = auto()
    SQRT = auto()
    EXP = auto()
    LOG = auto()
    SIN = auto()
    COS = auto()
    TAN = auto()
    ASIN = auto()
    ACOS = auto()
    ATAN = auto()
    SINH = auto()
    COSH = auto()
    TANH = auto()
    FLOOR = auto()
    CEIL = auto()
    ROUND = auto()


class ReduceOp(Enum):
    SUM = auto()
    MEAN = auto()
    MAX = auto()
    MIN = auto()
    VAR = auto()
    STD = auto()
    NORM = auto()


class ConvOp(Enum):
    CONV1D = auto()
    CONV2D = auto()
    CONV3D = auto()
    CONV_TRANSPOSE1D = auto()
    CONV_TRANSPOSE2D = auto()
    CONV_TRANSPOSE3D = auto()


class PoolOp(Enum):
    MAX_POOL1D = auto()
    MAX_POOL2D = auto()
    MAX_POOL3D = auto()
    AVG_POOL1D = auto()
    AVG_POOL2D = auto()
    AVG_POOL3D = auto()
    ADAPTIVE_MAX_POOL1D = auto()
    ADAPTIVE_MAX_POOL2D = auto()
    ADAPTIVE_MAX_POOL3D = auto()
    ADAPTIVE_AVG_POOL1D = auto()
    ADAPTIVE_AVG_POOL2D = auto()
    ADAPTIVE_AVG_POOL3D = auto()


class PaddingMode(Enum):
    ZERO = auto()
    REFLECT = auto()
    REPLICATE = auto()
    CIRCULAR = auto()


@dataclass
class ConvParams:
    """Stride, padding, dilation and grouping of a convolution."""

    stride: list[int] = field(default_factory=lambda: [1])
    padding: list[int] = field(default_factory=lambda: [0])
    dilation: list[int] = field(default_factory=lambda: [1])
    groups: int = 1
    padding_mode: PaddingMode = PaddingMode.ZERO


@dataclass
class PoolParams:
    """Window settings of a pooling operation; no stride means the kernel size."""

    kernel_size: list[int] = field(default_factory=lambda: [2])
    stride: list[int] | None = None
    padding: list[int] = field(default_factory=lambda: [0])
    dilation: list[int] = field(default_factory=lambda: [1])
    ceil_mode: bool = False


class FFTOp(Enum):
    FFT = auto()
    IFFT = auto()
    RFFT = auto()
    IRFFT = auto()


class SSMOp(Enum):
    SCAN = auto()
    CONV1D = auto()
    DISCRETIZE = auto()
    SELECTIVE_SCAN = auto()


class TopoOp(Enum):
    MOTIF_DETECT = auto()
    CYCLE_FIND = auto()
    STABILITY_CALC = auto()
    GEODESIC_DIST = auto()
    HNSW_SEARCH = auto()


class MoEOp(Enum):
    ROUTER = auto()
    TOP_K = auto()
    LOAD_BALANCE = auto()
    GATING = auto()


class QuantOp(Enum):
    QUANTIZE = auto()
    DEQUANTIZE = auto()
    QAT = auto()
    CALIBRATION = auto()


class RevOp(Enum):
    REV_NET = auto()
    REV_SSM = auto()
    REV_HYENA = auto()
    CHECKPOINT = auto()
    ROLLBACK = auto()


@dataclass
class OpResult(Generic[T]):
    """The result of an operation together with its cost."""

    result: T
    flops: int
    memory_used: int
    execution_time: timedelta