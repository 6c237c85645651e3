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
A composite made of named fields, each of which may declare its own byte order.

Layout: [field_0][field_1]...[field_N], in declaration order, with no padding.

A field without an override inherits the byte order of the enclosing scope, a field with an override uses it for its
whole subtree. Field values are looked up by key when the value is a mapping and by attribute otherwise, so dicts,
dataclasses and named tuples all work.

>>> from binwrite.layout import I32, U16
>>> fields = (
...     FieldEncoder('x', I32),
...     FieldEncoder('y', I32),
...     FieldEncoder('z', U16, Endian.BIG),
... )
>>> se = Serializer.build_bytes_serializer()
>>> encode_fields(se, {'x': 1, 'y': -2, 'z': 3}, fields, endian=Endian.LITTLE)
>>> bytes(se.finalize()).hex()
'01000000feffffff0003'
"""

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple, Optional

from binwrite.endian import Endian, resolve_endian
from binwrite.serializer import Serializer

from . import Encoder


class FieldEncoder(NamedTuple):
    name: str
    encoder: Encoder[Any]
    endian: Optional[Endian] = None


def get_field_value(value: Any, name: str) -> Any:
    """Read a single field from a mapping or from an object attribute."""
    try:
        if isinstance(value, Mapping):
            return value[name]
        return getattr(value, name)
    except (KeyError, AttributeError) as e:
        raise ValueError(f'value {type(value).__name__} has no field {name!r}') from e


def encode_fields(serializer: Serializer, value: Any, fields: Sequence[FieldEncoder], *, endian: Endian) -> None:
    for field in fields:
        field_value = get_field_value(value, field.name)
        field.encoder(serializer, field_value, resolve_endian(endian, field.endian))
