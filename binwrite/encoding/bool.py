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
This module implements encoding a boolean value using 1 byte.

The format is trivial and extremely simple:

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, False)
>>> encode_bool(se, True)
>>> bytes(se.finalize())
b'\x00\x01'
"""

from binwrite.serializer import Serializer


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value using 1 byte.
    """
    if not isinstance(value, bool):
        raise TypeError(f'expected bool, got {type(value).__name__}')
    serializer.write_byte(0x01 if value else 0x00)
