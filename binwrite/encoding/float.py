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
This module implements IEEE-754 encoding of floats, binary32 (`length=4`) or binary64 (`length=8`).

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.0, length=4, endian=Endian.BIG)  # writes 3f800000
>>> encode_float(se, 1.0, length=4, endian=Endian.LITTLE)  # writes 0000803f
>>> encode_float(se, -2.5, length=8, endian=Endian.BIG)  # writes c004000000000000
>>> bytes(se.finalize()).hex()
'3f8000000000803fc004000000000000'
"""

import struct

from binwrite.endian import Endian
from binwrite.serializer import Serializer

_FLOAT_FORMATS: dict[int, str] = {
    4: 'f',
    8: 'd',
}


def encode_float(serializer: Serializer, value: float, *, length: int, endian: Endian) -> None:
    """ Encode a float as IEEE-754 with the given byte-length and byte order.
    """
    fmt = _FLOAT_FORMATS.get(length)
    if fmt is None:
        raise ValueError(f'unsupported float width: {length}')
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'expected float, got {type(value).__name__}')
    try:
        serializer.write_struct((value,), endian.struct_prefix + fmt)
    except (OverflowError, struct.error) as e:
        raise ValueError(f'{value} does not fit in a {8 * length}-bit float') from e
