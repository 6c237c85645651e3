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
This module was made to hold compound encoding implementations.

Compound encoders are encoders that are generic in some way and will delegate the encoding of some portion to another
encoder. For example a fixed-size array encoder writes nothing of its own and delegates every element to an encoder
that knows how to encode the element type.

The general organization should be that each submodule `x` deals with a single shape and look like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params..., *, endian: Endian) -> None:
        ...

The `endian` received is the one inherited from the enclosing scope. A compound encoder passes it down unchanged to
its children unless a child declares an override, in which case the override is used for that child's whole subtree.
Children are always written in order, depth-first, and the first failure stops the remaining children.
"""

from typing import Protocol, TypeVar

from binwrite.endian import Endian
from binwrite.serializer import Serializer

T_contra = TypeVar('T_contra', contravariant=True)


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, endian: Endian, /) -> None:
        ...
