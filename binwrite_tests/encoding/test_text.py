import pytest

from binwrite.encoding.bool import encode_bool
from binwrite.encoding.bytes import encode_raw_bytes
from binwrite.encoding.leb128 import encode_leb128
from binwrite.encoding.utf8 import encode_char, encode_cstr, encode_utf8
from binwrite.encoding.utf16 import encode_utf16, encode_utf16_null
from binwrite.endian import Endian
from binwrite.serializer import Serializer


def test_utf8_has_no_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    encode_utf8(se, 'ハトホル')
    assert bytes(se.finalize()) == 'ハトホル'.encode('utf-8')


def test_cstr_appends_single_nul() -> None:
    se = Serializer.build_bytes_serializer()
    encode_cstr(se, 'abc')
    assert bytes(se.finalize()) == b'abc\x00'


def test_text_formats_any_value() -> None:
    se = Serializer.build_bytes_serializer()
    encode_utf8(se, 3.5)
    encode_cstr(se, 7)
    assert bytes(se.finalize()) == b'3.57\x00'


@pytest.mark.parametrize('char, size', [('a', 1), ('π', 2), ('ハ', 3), ('😎', 4)])
def test_char_sizes(char: str, size: int) -> None:
    se = Serializer.build_bytes_serializer()
    encode_char(se, char)
    assert se.cur_pos() == size


@pytest.mark.parametrize('value', ['', 'ab', 1])
def test_char_rejects_non_characters(value: object) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_char(se, value)  # type: ignore[arg-type]


def test_utf16_follows_endianness() -> None:
    se = Serializer.build_bytes_serializer()
    encode_utf16(se, 'ab', endian=Endian.BIG)
    encode_utf16(se, 'ab', endian=Endian.LITTLE)
    assert bytes(se.finalize()) == 'ab'.encode('utf-16-be') + 'ab'.encode('utf-16-le')


def test_utf16_null_terminator_uses_endianness() -> None:
    se = Serializer.build_bytes_serializer()
    encode_utf16_null(se, '😎', endian=Endian.LITTLE)
    assert bytes(se.finalize()) == '😎'.encode('utf-16-le') + b'\x00\x00'


def test_bool() -> None:
    se = Serializer.build_bytes_serializer()
    encode_bool(se, True)
    encode_bool(se, False)
    with pytest.raises(TypeError):
        encode_bool(se, 1)  # type: ignore[arg-type]
    assert bytes(se.finalize()) == b'\x01\x00'


def test_raw_bytes_rejects_str() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(TypeError):
        encode_raw_bytes(se, 'abc')  # type: ignore[arg-type]


@pytest.mark.parametrize('n, encoded', [
    (0, '00'),
    (127, '7f'),
    (128, '8001'),
    (624485, 'e58e26'),
])
def test_unsigned_leb128(n: int, encoded: str) -> None:
    se = Serializer.build_bytes_serializer()
    encode_leb128(se, n, signed=False)
    assert bytes(se.finalize()).hex() == encoded


def test_unsigned_leb128_rejects_negative() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_leb128(se, -1, signed=False)


@pytest.mark.parametrize('value', [True, False, 1.0, '1'])
@pytest.mark.parametrize('signed', [True, False])
def test_leb128_rejects_non_int(value: object, signed: bool) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(TypeError):
        encode_leb128(se, value, signed=signed)  # type: ignore[arg-type]
    assert se.cur_pos() == 0
