import pytest

from binwrite.compound_encoding.array import encode_array
from binwrite.endian import Endian
from binwrite.exceptions import ArrayLengthError
from binwrite.layout import CSTR, U16, U32
from binwrite.serializer import Serializer


def test_no_prefix_and_no_separator() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, (1, 2), U32, length=2, endian=Endian.LITTLE)
    assert bytes(se.finalize()) == bytes.fromhex('01000000 02000000')


def test_empty_array_writes_nothing() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, [], U32, length=0, endian=Endian.BIG)
    assert se.cur_pos() == 0


def test_variable_size_elements_are_concatenated() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, ['a', 'bcd'], CSTR, length=2, endian=Endian.BIG)
    assert bytes(se.finalize()) == b'a\x00bcd\x00'


@pytest.mark.parametrize('values', [[1], [1, 2, 3, 4]])
def test_count_mismatch_is_a_hard_error(values: list[int]) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ArrayLengthError) as exc_info:
        encode_array(se, values, U16, length=3, endian=Endian.BIG)
    assert exc_info.value.expected == 3
    assert exc_info.value.actual == len(values)
    assert se.cur_pos() == 0
