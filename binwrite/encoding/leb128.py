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

"""
This module implements LEB128 for signed and unsigned integers.

LEB128 or Little Endian Base 128 is a variable-length code compression used to store arbitrarily large
integers in a small number of bytes. It is mostly useful here for length prefixes of variable-length collections.

References:
- https://en.wikipedia.org/wiki/LEB128
- https://webassembly.github.io/spec/core/binary/values.html#integers

Each byte holds 7 bits of data and 1 continuation bit. The byte order of the enclosing scope has no effect on it.

>>> se = Serializer.build_bytes_serializer()
>>> encode_leb128(se, 0, signed=True)  # writes 00
>>> encode_leb128(se, 624485, signed=True)  # writes e58e26
>>> encode_leb128(se, -123456, signed=True)  # writes c0bb78
>>> encode_leb128(se, 300, signed=False)  # writes ac02
>>> bytes(se.finalize()).hex()
'00e58e26c0bb78ac02'
"""

from binwrite.serializer import Serializer


def encode_leb128(serializer: Serializer, value: int, *, signed: bool) -> None:
    """ Encodes an integer using LEB128.

    Caller must explicitly choose `signed=True` or `signed=False`.

    This module's docstring has more details on LEB128 and examples.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'expected int, got {type(value).__name__}')
    if not signed and value < 0:
        raise ValueError('cannot encode value <0 as unsigned')
    while True:
        byte = value & 0b0111_1111
        value >>= 7
        if signed:
            cont = (value == 0 and (byte & 0b0100_0000) == 0) or (value == -1 and (byte & 0b0100_0000) != 0)
        else:
            cont = (value == 0 and (byte & 0b1000_0000) == 0)
        if cont:
            serializer.write_byte(byte)
            break
        serializer.write_byte(byte | 0b1000_0000)
