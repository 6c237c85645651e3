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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

Integers are written in two's complement using exactly `length` bytes, in the given byte order. The width never
depends on the magnitude of the value, a value that does not fit is rejected instead of being truncated.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True, endian=Endian.BIG)  # writes 00
>>> encode_int(se, 255, length=1, signed=False, endian=Endian.BIG)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True, endian=Endian.BIG)  # writes 04d2
>>> encode_int(se, 1234, length=2, signed=True, endian=Endian.LITTLE)  # writes d204
>>> encode_int(se, -2, length=4, signed=True, endian=Endian.LITTLE)  # writes feffffff
>>> bytes(se.finalize()).hex()
'00ff04d2d204feffffff'

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False, endian=Endian.BIG)
... except ValueError as e:
...     print(e)
256 does not fit in 1 unsigned byte(s)
"""

from binwrite.endian import Endian
from binwrite.serializer import Serializer


def int_bounds(length: int, signed: bool) -> tuple[int, int]:
    """ Smallest and largest integers representable with `length` bytes.

    >>> int_bounds(1, True)
    (-128, 127)
    >>> int_bounds(2, False)
    (0, 65535)
    """
    bits = 8 * length
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, endian: Endian) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f'expected int, got {type(number).__name__}')
    try:
        data = int.to_bytes(number, length, byteorder=endian.byteorder, signed=signed)
    except OverflowError:
        signedness = 'signed' if signed else 'unsigned'
        raise ValueError(f'{number} does not fit in {length} {signedness} byte(s)')
    serializer.write_bytes(data)
