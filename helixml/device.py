"""Compute device descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeviceKind(Enum):
    """Family of a compute device."""

    CPU = "cpu"
    CUDA = "cuda"
    METAL = "metal"
    WGPU = "wgpu"
    QPU = "qpu"
    NPU = "npu"
    TPU = "tpu"
    CUSTOM = "custom"


_INDEXED = frozenset({DeviceKind.CUDA, DeviceKind.QPU, DeviceKind.NPU, DeviceKind.TPU})
_GPU = frozenset({DeviceKind.CUDA, DeviceKind.METAL, DeviceKind.WGPU})
_AI = frozenset({DeviceKind.QPU, DeviceKind.NPU, DeviceKind.TPU})


@dataclass(frozen=True)
class Device:
    """A device on which tensors are computed; the default is the CPU."""

    kind: DeviceKind = DeviceKind.CPU
    index: int | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _INDEXED:
            if not isinstance(self.index, int) or self.index < 0:
                raise ValueError(f"{self.kind.value} device needs a non-negative index")
        elif self.index is not None:
            raise ValueError(f"{self.kind.value} device takes no index")
        if self.kind is DeviceKind.CUSTOM:
            if not self.label:
                raise ValueError("custom device needs a label")
        elif self.label is not None:
            raise ValueError(f"{self.kind.value} device takes no label")

    @classmethod
    def cpu(cls) -> Device:
        return cls(DeviceKind.CPU)

    @classmethod
    def cuda(cls, index: int) -> Device:
        return cls(DeviceKind.CUDA, index)

    @classmethod
    def metal(cls) -> Device:
        return cls(DeviceKind.METAL)

    @classmethod
    def wgpu(cls) -> Device:
        return cls(DeviceKind.WGPU)

    @classmethod
    def qpu(cls, index: int) -> Device:
        return cls(DeviceKind.QPU, index)

    @classmethod
    def npu(cls, index: int) -> Device:
        return cls(DeviceKind.NPU, index)

    @classmethod
    def tpu(cls, index: int) -> Device:
        return cls(DeviceKind.TPU, index)

    @classmethod
    def custom(cls, label: str) -> Device:
        return cls(DeviceKind.CUSTOM, label=label)

    def is_cpu(self) -> bool:
        return self.kind is DeviceKind.CPU

    def is_gpu(self) -> bool:
        return self.kind in _GPU

    def is_ai_processor(self) -> bool:
        return self.kind in _AI

    def is_cuda(self) -> bool:
        return self.kind is DeviceKind.CUDA

    def is_qpu(self) -> bool:
        return self.kind is DeviceKind.QPU

    def is_npu(self) -> bool:
        return self.kind is DeviceKind.NPU

    def is_tpu(self) -> bool:
        return self.kind is DeviceKind.TPU

    def _index_if(self, kind: DeviceKind) -> int | None:
        return self.index if self.kind is kind else None

    def cuda_id(self) -> int | None:
        return self._index_if(DeviceKind.CUDA)

    def qpu_id(self) -> int | None:
        return self._index_if(DeviceKind.QPU)

    def npu_id(self) -> int | None:
        return self._index_if(DeviceKind.NPU)

    def tpu_id(self) -> int | None:
        return self._index_if(DeviceKind.TPU)

    def name(self) -> str:
        """Display name such as ``cpu`` or ``cuda:0``."""
        if self.kind is DeviceKind.CUSTOM:
            return self.label or ""
        if self.kind in _INDEXED:
            return f"{self.kind.value}:{self.index}"
        return self.kind.value

    def __str__(self) -> str:
        return self.name()