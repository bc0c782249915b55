from datetime import timedelta

from helixml.ops import (
    ConvParams,
    FFTOp,
    OpResult,
    PaddingMode,
    PoolParams,
    SSMOp,
)


def test_conv_params_defaults():
    params = ConvParams()
    assert params.stride == [1]
    assert params.padding == [0]
    assert params.dilation == [1]
    assert params.groups == 1
    assert params.padding_mode is PaddingMode.ZERO


def test_conv_params_defaults_not_shared():
    first, second = ConvParams(), ConvParams()
    first.stride.append(2)
    assert second.stride == [1]


def test_pool_params_defaults():
    params = PoolParams()
    assert params.kernel_size == [2]
    assert params.stride is None
    assert params.padding == [0]
    assert params.ceil_mode is False


def test_enum_members():
    assert {op.name for op in FFTOp} == {"FFT", "IFFT", "RFFT", "IRFFT"}
    assert FFTOp(FFTOp.RFFT.value) is FFTOp.RFFT
    assert SSMOp(SSMOp.SELECTIVE_SCAN.value) is SSMOp.SELECTIVE_SCAN


def test_op_result_holds_values():
    elapsed = timedelta(milliseconds=5)
    res = OpResult(result=[1.0, 2.0], flops=10, memory_used=64, execution_time=elapsed)
    assert res.result == [1.0, 2.0]
    assert res.flops == 10
    assert res.memory_used == 64
    assert res.execution_time == elapsed