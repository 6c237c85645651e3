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
Byte order used when writing multi-byte primitives.

An endianness is never global state, it is passed as a parameter through every encoder call. A layout can carry an
optional override, `None` means "inherit whatever the enclosing scope uses":

>>> resolve_endian(Endian.LITTLE, None)
<Endian.LITTLE: 'little'>
>>> resolve_endian(Endian.LITTLE, Endian.BIG)
<Endian.BIG: 'big'>
>>> Endian.BIG.byteorder
'big'
>>> Endian.NATIVE.byteorder == sys.byteorder
True
"""

import sys
from enum import Enum
from typing import Literal, Optional


class Endian(str, Enum):
    BIG = 'big'
    LITTLE = 'little'
    NATIVE = 'native'

    @property
    def byteorder(self) -> Literal['big', 'little']:
        """Concrete order for `int.to_bytes`, `NATIVE` is the byte order of the running host."""
        match self:
            case Endian.BIG:
                return 'big'
            case Endian.LITTLE:
                return 'little'
            case Endian.NATIVE:
                return sys.byteorder

    @property
    def struct_prefix(self) -> str:
        """Byte-order character for `struct` formats, always with standard sizes and no alignment."""
        match self:
            case Endian.BIG:
                return '>'
            case Endian.LITTLE:
                return '<'
            case Endian.NATIVE:
                return '='

    def __str__(self) -> str:
        return self.value.capitalize()


def resolve_endian(inherited: Endian, override: Optional[Endian]) -> Endian:
    """Return the override when there is one, otherwise the inherited endianness."""
    if override is not None:
        return override
    return inherited
