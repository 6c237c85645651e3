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
A fixed-length array is a sequence whose element count is part of its type, like `[T; N]`.

Layout: [value_0]...[value_N-1], no length prefix and no separators.

The element count is checked before anything is written, a value with the wrong number of elements is rejected with
`ArrayLengthError` instead of being truncated or padded.

>>> from binwrite.layout import U16
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, 2, 3], U16, length=3, endian=Endian.BIG)
>>> bytes(se.finalize()).hex()
'000100020003'

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_array(se, [1, 2], U16, length=3, endian=Endian.BIG)
... except ArrayLengthError as e:
...     print(e)
fixed array expects 3 elements, got 2
>>> se.cur_pos()
0
"""

from collections.abc import Sequence
from typing import TypeVar

from binwrite.endian import Endian
from binwrite.exceptions import ArrayLengthError
from binwrite.serializer import Serializer

from . import Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Sequence[T], encoder: Encoder[T], *, length: int,
                 endian: Endian) -> None:
    if len(values) != length:
        raise ArrayLengthError(length, len(values))
    for value in values:
        encoder(serializer, value, endian)
