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
A collection is any iterable of same-typed values whose count is only known when encoding.

Layout: [value_0]...[value_N]

Nothing else is written: no count and no terminator. How the count reaches the reader is a decision of the enclosing
layout, which can either declare an explicit length field or rely on external framing. When the enclosing layout keeps
its own length field it is responsible for keeping it consistent with the collection, `check_length_representable`
helps with the range part of that.

>>> from binwrite.layout import U16, U8
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, [1, 2, 3], U16, endian=Endian.LITTLE)
>>> bytes(se.finalize()).hex()
'010002000300'

The explicit length-prefixed variant writes the count with its own encoder first:

>>> se = Serializer.build_bytes_serializer()
>>> encode_length_prefixed(se, [1, 2, 3], U16, U8, max_count=255, endian=Endian.BIG)
>>> bytes(se.finalize()).hex()
'03000100020003'
"""

from collections.abc import Collection, Iterable
from typing import Optional, TypeVar

from binwrite.endian import Endian
from binwrite.exceptions import UnrepresentableLengthError
from binwrite.serializer import Serializer

from . import Encoder

T = TypeVar('T')


def check_length_representable(count: int, max_count: Optional[int]) -> None:
    """ Make sure a length field that holds at most `max_count` can store `count`, `None` means unbounded.

    >>> check_length_representable(255, 255)
    >>> check_length_representable(256, 255)
    Traceback (most recent call last):
    ...
    binwrite.exceptions.UnrepresentableLengthError: length 256 does not fit the length field (max 255)
    """
    if max_count is not None and count > max_count:
        raise UnrepresentableLengthError(count, max_count)


def encode_collection(serializer: Serializer, values: Iterable[T], encoder: Encoder[T], *, endian: Endian) -> None:
    for value in values:
        encoder(serializer, value, endian)


def encode_length_prefixed(
    serializer: Serializer,
    values: Collection[T],
    encoder: Encoder[T],
    count_encoder: Encoder[int],
    *,
    max_count: Optional[int],
    endian: Endian,
) -> None:
    count = len(values)
    check_length_representable(count, max_count)
    count_encoder(serializer, count, endian)
    encode_collection(serializer, values, encoder, endian=endian)
