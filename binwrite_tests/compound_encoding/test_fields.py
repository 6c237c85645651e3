from dataclasses import dataclass
from typing import NamedTuple

import pytest

from binwrite.compound_encoding.fields import FieldEncoder, encode_fields, get_field_value
from binwrite.endian import Endian
from binwrite.layout import U16, U32
from binwrite.serializer import Serializer

FIELDS = (
    FieldEncoder('a', U16),
    FieldEncoder('b', U32, Endian.BIG),
)


@dataclass
class AsDataclass:
    a: int
    b: int


class AsNamedTuple(NamedTuple):
    a: int
    b: int


@pytest.mark.parametrize('value', [
    {'a': 1, 'b': 2},
    AsDataclass(a=1, b=2),
    AsNamedTuple(a=1, b=2),
])
def test_field_sources(value: object) -> None:
    se = Serializer.build_bytes_serializer()
    encode_fields(se, value, FIELDS, endian=Endian.LITTLE)
    assert bytes(se.finalize()) == bytes.fromhex('0100 00000002')


def test_missing_field() -> None:
    with pytest.raises(ValueError, match="no field 'b'"):
        get_field_value({'a': 1}, 'b')


def test_fields_are_written_in_declaration_order() -> None:
    se = Serializer.build_bytes_serializer()
    encode_fields(se, {'b': 2, 'a': 1}, FIELDS, endian=Endian.LITTLE)
    assert bytes(se.finalize())[:2] == b'\x01\x00'
