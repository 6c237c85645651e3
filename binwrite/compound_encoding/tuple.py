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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection or the
array encoder.

There actually isn't a "format" per-se, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B
concatenated with C, without padding or alignment. So this compound encoder is basically a shortcut that can be used
by cases that already have a tuple of values and a matching tuple of encoders of those values.

>>> from binwrite.layout import U8, U16
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, (1, 2), (U8, U16), endian=Endian.LITTLE)
>>> encode_tuple(se, (1, 2), (U8, U16), endian=Endian.BIG)
>>> encode_tuple(se, (), (), endian=Endian.BIG)
>>> bytes(se.finalize()).hex()
'010200010002'
"""

from collections.abc import Sequence
from typing import Any

from binwrite.endian import Endian
from binwrite.serializer import Serializer

from . import Encoder


def encode_tuple(
    serializer: Serializer,
    values: Sequence[Any],
    encoders: Sequence[Encoder[Any]],
    *,
    endian: Endian,
) -> None:
    if len(values) != len(encoders):
        raise ValueError(f'expected a tuple of {len(encoders)} values, got {len(values)}')
    for value, encoder in zip(values, encoders):
        encoder(serializer, value, endian)
