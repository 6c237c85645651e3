import math
import struct

import pytest

from binwrite.encoding.float import encode_float
from binwrite.endian import Endian
from binwrite.serializer import Serializer


def _encode(value: float, length: int, endian: Endian) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_float(se, value, length=length, endian=endian)
    return bytes(se.finalize())


@pytest.mark.parametrize('value', [0.0, -0.0, 1.0, -2.5, 3.141592653589793, math.inf, 1e-300])
def test_f64_matches_struct(value: float) -> None:
    assert _encode(value, 8, Endian.BIG) == struct.pack('>d', value)
    assert _encode(value, 8, Endian.LITTLE) == struct.pack('<d', value)


@pytest.mark.parametrize('value', [0.0, 1.0, -2.5, 0.1, -math.inf])
def test_f32_matches_struct(value: float) -> None:
    big = _encode(value, 4, Endian.BIG)
    assert big == struct.pack('>f', value)
    assert _encode(value, 4, Endian.LITTLE) == big[::-1]


def test_nan_is_written() -> None:
    data = _encode(math.nan, 4, Endian.BIG)
    assert len(data) == 4
    assert math.isnan(struct.unpack('>f', data)[0])


def test_int_values_are_accepted() -> None:
    assert _encode(1, 4, Endian.BIG) == bytes.fromhex('3f800000')


def test_f32_overflow() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_float(se, 1e300, length=4, endian=Endian.BIG)
    assert se.cur_pos() == 0


def test_unsupported_width() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError, match='unsupported float width'):
        encode_float(se, 1.0, length=2, endian=Endian.BIG)
