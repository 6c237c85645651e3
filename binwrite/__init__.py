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
Encode typed values into an exact byte layout, with per-field byte order control.

>>> from binwrite import Endian, I32, StructBuilder, encode_to_bytes
>>> layout = StructBuilder('Pair', endian=Endian.LITTLE).field('x', I32).field('y', I32).build()
>>> encode_to_bytes(layout, {'x': 1, 'y': -2}).hex()
'01000000feffffff'
"""

from binwrite.api import encode, encode_to_bytes
from binwrite.bytes_serializer import BytesSerializer
from binwrite.endian import Endian, resolve_endian
from binwrite.exceptions import ArrayLengthError, SerializationError, SinkError, UnrepresentableLengthError
from binwrite.layout import (
    BOOL,
    BYTES,
    CHAR,
    CSTR,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    SLEB128,
    STR,
    U8,
    U16,
    U32,
    U64,
    U128,
    ULEB128,
    UTF16,
    UTF16_NULL,
    Array,
    Field,
    Layout,
    LengthPrefixed,
    Struct,
    StructBuilder,
    Tuple,
    Vec,
    WithEndian,
)
from binwrite.serializer import Serializer
from binwrite.stream_serializer import StreamSerializer
from binwrite.version import __version__

__all__ = [
    'encode',
    'encode_to_bytes',
    'BytesSerializer',
    'Serializer',
    'StreamSerializer',
    'Endian',
    'resolve_endian',
    'ArrayLengthError',
    'SerializationError',
    'SinkError',
    'UnrepresentableLengthError',
    'Layout',
    'Array',
    'Field',
    'LengthPrefixed',
    'Struct',
    'StructBuilder',
    'Tuple',
    'Vec',
    'WithEndian',
    'BOOL',
    'BYTES',
    'CHAR',
    'CSTR',
    'F32',
    'F64',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'SLEB128',
    'STR',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'ULEB128',
    'UTF16',
    'UTF16_NULL',
    '__version__',
]
