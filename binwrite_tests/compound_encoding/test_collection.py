import pytest

from binwrite.compound_encoding.collection import (
    check_length_representable,
    encode_collection,
    encode_length_prefixed,
)
from binwrite.endian import Endian
from binwrite.exceptions import UnrepresentableLengthError
from binwrite.layout import U8, U16, ULEB128
from binwrite.serializer import Serializer


@pytest.mark.parametrize('size', [0, 1, 2, 17, 300])
def test_collection_writes_only_elements(size: int) -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, list(range(size)), U16, endian=Endian.BIG)
    assert se.cur_pos() == 2 * size


def test_collection_accepts_any_iterable() -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, (i for i in range(3)), U8, endian=Endian.BIG)
    assert bytes(se.finalize()) == b'\x00\x01\x02'


def test_length_prefixed_with_leb128_count() -> None:
    se = Serializer.build_bytes_serializer()
    encode_length_prefixed(se, [0] * 200, U8, ULEB128, max_count=None, endian=Endian.BIG)
    data = bytes(se.finalize())
    assert data[:2] == bytes.fromhex('c801')
    assert len(data) == 202


def test_length_prefixed_rejects_unrepresentable_count() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(UnrepresentableLengthError) as exc_info:
        encode_length_prefixed(se, [0] * 256, U8, U8, max_count=255, endian=Endian.BIG)
    assert exc_info.value.count == 256
    assert exc_info.value.max_count == 255
    assert se.cur_pos() == 0


def test_check_length_representable() -> None:
    check_length_representable(10, None)
    check_length_representable(10, 10)
    with pytest.raises(UnrepresentableLengthError):
        check_length_representable(11, 10)
