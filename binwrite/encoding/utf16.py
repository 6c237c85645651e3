# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This module implements utf-16 text encoding without a length prefix or byte order mark.

Each code unit is written as a 2-byte unsigned integer in the byte order of the enclosing scope, characters outside
the basic multilingual plane take two code units (a surrogate pair). The NUL terminated flavor appends one 0x0000
code unit.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf16(se, 'hi', endian=Endian.BIG)  # writes 00680069
>>> encode_utf16(se, 'hi', endian=Endian.LITTLE)  # writes 68006900
>>> encode_utf16_null(se, 'A', endian=Endian.BIG)  # writes 00410000
>>> encode_utf16(se, '😎', endian=Endian.BIG)  # writes d83dde0e
>>> bytes(se.finalize()).hex()
'006800696800690000410000d83dde0e'
"""

from typing import Any

from binwrite.encoding.int import encode_int
from binwrite.endian import Endian
from binwrite.serializer import Serializer


def _code_units(text: str) -> list[int]:
    data = text.encode('utf-16-be')
    return [int.from_bytes(data[i:i + 2], byteorder='big') for i in range(0, len(data), 2)]


def encode_utf16(serializer: Serializer, value: Any, *, endian: Endian) -> None:
    for unit in _code_units(str(value)):
        encode_int(serializer, unit, length=2, signed=False, endian=endian)


def encode_utf16_null(serializer: Serializer, value: Any, *, endian: Endian) -> None:
    encode_utf16(serializer, value, endian=endian)
    encode_int(serializer, 0, length=2, signed=False, endian=endian)
