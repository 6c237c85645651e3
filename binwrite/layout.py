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
Layouts describe the binary shape of a value: which encoder handles it and, for compound shapes, how the children
are laid out. A value is a plain Python object (int, float, tuple, list, dict, dataclass, ...), the layout is what
gives it a width, a signedness and a byte order.

Every layout is itself an `Encoder`, so layouts can be nested freely:

>>> point = (
...     StructBuilder('Point', endian=Endian.LITTLE)
...     .field('x', I32)
...     .field('y', I32)
...     .field('size', Tuple(U16, U16), endian=Endian.BIG)
...     .build()
... )
>>> se = Serializer.build_bytes_serializer()
>>> point.encode(se, {'x': 1, 'y': -2, 'size': (3, 4)}, Endian.NATIVE)
>>> bytes(se.finalize()).hex(' ')
'01 00 00 00 fe ff ff ff 00 03 00 04'
>>> point.fixed_size
12
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from typing_extensions import Self, override

from binwrite.compound_encoding.array import encode_array
from binwrite.compound_encoding.collection import (
    check_length_representable,
    encode_collection,
    encode_length_prefixed,
)
from binwrite.compound_encoding.fields import FieldEncoder, encode_fields
from binwrite.compound_encoding.tuple import encode_tuple
from binwrite.encoding.bool import encode_bool
from binwrite.encoding.bytes import encode_raw_bytes
from binwrite.encoding.float import encode_float
from binwrite.encoding.int import encode_int, int_bounds
from binwrite.encoding.leb128 import encode_leb128
from binwrite.encoding.utf8 import encode_char, encode_cstr, encode_utf8
from binwrite.encoding.utf16 import encode_utf16, encode_utf16_null
from binwrite.endian import Endian, resolve_endian
from binwrite.serializer import Serializer


class Layout(ABC):
    """Base class of all layouts."""

    @abstractmethod
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        """Write `value` to `serializer`, `endian` is the byte order inherited from the enclosing scope."""
        raise NotImplementedError

    @property
    def fixed_size(self) -> Optional[int]:
        """Encoded size in bytes when it doesn't depend on the value, `None` otherwise."""
        return None

    def __call__(self, serializer: Serializer, value: Any, endian: Endian, /) -> None:
        self.encode(serializer, value, endian)


# Primitives

@dataclass(frozen=True)
class Int(Layout):
    length: int
    signed: bool

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError('int length must be positive')

    @property
    def max_value(self) -> int:
        return int_bounds(self.length, self.signed)[1]

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_int(serializer, value, length=self.length, signed=self.signed, endian=endian)

    @property
    @override
    def fixed_size(self) -> int:
        return self.length

    def __str__(self) -> str:
        return f'{"I" if self.signed else "U"}{8 * self.length}'


@dataclass(frozen=True)
class Float(Layout):
    length: int

    def __post_init__(self) -> None:
        if self.length not in (4, 8):
            raise ValueError('float length must be 4 or 8')

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_float(serializer, value, length=self.length, endian=endian)

    @property
    @override
    def fixed_size(self) -> int:
        return self.length

    def __str__(self) -> str:
        return f'F{8 * self.length}'


@dataclass(frozen=True)
class Bool(Layout):
    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_bool(serializer, value)

    @property
    @override
    def fixed_size(self) -> int:
        return 1

    def __str__(self) -> str:
        return 'Bool'


@dataclass(frozen=True)
class Leb128(Layout):
    signed: bool

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_leb128(serializer, value, signed=self.signed)

    def __str__(self) -> str:
        return 'SLeb128' if self.signed else 'ULeb128'


@dataclass(frozen=True)
class Char(Layout):
    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_char(serializer, value)

    def __str__(self) -> str:
        return 'Char'


@dataclass(frozen=True)
class Utf8(Layout):
    null_terminated: bool = False

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        if self.null_terminated:
            encode_cstr(serializer, value)
        else:
            encode_utf8(serializer, value)

    def __str__(self) -> str:
        return 'CStr' if self.null_terminated else 'Str'


@dataclass(frozen=True)
class Utf16(Layout):
    null_terminated: bool = False

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        if self.null_terminated:
            encode_utf16_null(serializer, value, endian=endian)
        else:
            encode_utf16(serializer, value, endian=endian)

    def __str__(self) -> str:
        return 'Utf16Null' if self.null_terminated else 'Utf16'


@dataclass(frozen=True)
class RawBytes(Layout):
    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_raw_bytes(serializer, value)

    def __str__(self) -> str:
        return 'Bytes'


U8 = Int(1, signed=False)
U16 = Int(2, signed=False)
U32 = Int(4, signed=False)
U64 = Int(8, signed=False)
U128 = Int(16, signed=False)
I8 = Int(1, signed=True)
I16 = Int(2, signed=True)
I32 = Int(4, signed=True)
I64 = Int(8, signed=True)
I128 = Int(16, signed=True)
F32 = Float(4)
F64 = Float(8)
BOOL = Bool()
CHAR = Char()
STR = Utf8()
CSTR = Utf8(null_terminated=True)
UTF16 = Utf16()
UTF16_NULL = Utf16(null_terminated=True)
BYTES = RawBytes()
ULEB128 = Leb128(signed=False)
SLEB128 = Leb128(signed=True)


# Compounds

def _sum_fixed_sizes(layouts: Sequence[Layout]) -> Optional[int]:
    total = 0
    for layout in layouts:
        size = layout.fixed_size
        if size is None:
            return None
        total += size
    return total


@dataclass(frozen=True)
class WithEndian(Layout):
    """Wraps any layout with a byte order override that applies to its whole subtree."""

    inner: Layout
    endian: Endian

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        self.inner.encode(serializer, value, resolve_endian(endian, self.endian))

    @property
    @override
    def fixed_size(self) -> Optional[int]:
        return self.inner.fixed_size

    def __str__(self) -> str:
        return f'{self.inner!s}@{self.endian!s}'


@dataclass(frozen=True, init=False)
class Tuple(Layout):
    """Positional composite, `Tuple()` is the unit layout and writes nothing."""

    members: tuple[Layout, ...]

    def __init__(self, *members: Layout) -> None:
        object.__setattr__(self, 'members', members)

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_tuple(serializer, tuple(value), self.members, endian=endian)

    @property
    @override
    def fixed_size(self) -> Optional[int]:
        return _sum_fixed_sizes(self.members)

    def __str__(self) -> str:
        return f'({", ".join(str(m) for m in self.members)})'


@dataclass(frozen=True)
class Array(Layout):
    """Fixed-length sequence, the element count is part of the layout."""

    element: Layout
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError('array length cannot be negative')

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_array(serializer, value, self.element, length=self.length, endian=endian)

    @property
    @override
    def fixed_size(self) -> Optional[int]:
        if self.length == 0:
            return 0
        element_size = self.element.fixed_size
        if element_size is None:
            return None
        return element_size * self.length

    def __str__(self) -> str:
        return f'[{self.element}; {self.length}]'


@dataclass(frozen=True)
class Vec(Layout):
    """Variable-length sequence, only the elements are written."""

    element: Layout

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_collection(serializer, value, self.element, endian=endian)

    def __str__(self) -> str:
        return f'Vec<{self.element}>'


@dataclass(frozen=True)
class LengthPrefixed(Layout):
    """Explicit count field followed by a `Vec` or `BYTES` value.

    The count is `len(value)` written with `count`, which must be an unsigned `Int` or `ULEB128`, possibly wrapped in
    `WithEndian` to give the count its own byte order. A count that does not fit the declared integer is reported as
    `UnrepresentableLengthError` before anything is written.
    """

    inner: Layout
    count: Layout = U32

    def __post_init__(self) -> None:
        if not isinstance(self.inner, (Vec, RawBytes)):
            raise TypeError(f'cannot length-prefix {self.inner}, only Vec and Bytes are supported')
        count = self._count_base
        if isinstance(count, Int):
            if count.signed:
                raise TypeError('length field must be unsigned')
        elif count != ULEB128:
            raise TypeError(f'unsupported length field: {self.count}')

    @property
    def _count_base(self) -> Layout:
        count = self.count
        while isinstance(count, WithEndian):
            count = count.inner
        return count

    @property
    def max_count(self) -> Optional[int]:
        count = self._count_base
        if isinstance(count, Int):
            return count.max_value
        return None

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        if isinstance(self.inner, Vec):
            encode_length_prefixed(serializer, value, self.inner.element, self.count, max_count=self.max_count,
                                   endian=endian)
        else:
            data = memoryview(value)
            check_length_representable(data.nbytes, self.max_count)
            self.count.encode(serializer, data.nbytes, endian)
            self.inner.encode(serializer, data, endian)

    def __str__(self) -> str:
        return f'{self.count}-prefixed {self.inner}'


@dataclass(frozen=True)
class Field:
    """Named member of a `Struct`, `endian=None` inherits the byte order of the struct."""

    name: str
    layout: Layout
    endian: Optional[Endian] = None


@dataclass(frozen=True)
class Struct(Layout):
    """Named composite. Its own `endian`, if any, is the default for all of its fields."""

    name: str
    fields: tuple[Field, ...]
    endian: Optional[Endian] = None
    _encoders: tuple[FieldEncoder, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        duplicated = sorted({n for n in names if names.count(n) > 1})
        if duplicated:
            raise ValueError(f'{self.name}: duplicated fields {duplicated}')
        encoders = tuple(FieldEncoder(f.name, f.layout, f.endian) for f in self.fields)
        object.__setattr__(self, '_encoders', encoders)

    @override
    def encode(self, serializer: Serializer, value: Any, endian: Endian) -> None:
        encode_fields(serializer, value, self._encoders, endian=resolve_endian(endian, self.endian))

    @property
    @override
    def fixed_size(self) -> Optional[int]:
        return _sum_fixed_sizes([f.layout for f in self.fields])

    def __str__(self) -> str:
        return self.name


class StructBuilder:
    """ Builds a `Struct` one field at a time, in declaration order.

    >>> header = StructBuilder('Header').field('magic', U8).field('length', U32, endian=Endian.BIG).build()
    >>> [f.name for f in header.fields]
    ['magic', 'length']
    """

    def __init__(self, name: str, *, endian: Optional[Endian] = None) -> None:
        self._name = name
        self._endian = endian
        self._fields: list[Field] = []

    def field(self, name: str, layout: Layout, *, endian: Optional[Endian] = None) -> Self:
        self._fields.append(Field(name, layout, endian))
        return self

    def build(self) -> Struct:
        return Struct(self._name, tuple(self._fields), self._endian)
