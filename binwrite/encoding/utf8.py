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
This module implements utf-8 text encoding without a length prefix.

Three flavors are available: the plain text, the text followed by a NUL byte (C string) and a single character.
Values are formatted with `str()` first, so anything printable can be written.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foo')  # writes 666f6f
>>> encode_cstr(se, 'bar')  # writes 62617200
>>> encode_char(se, 'π')  # writes cf80
>>> encode_utf8(se, 42)  # writes 3432
>>> bytes(se.finalize()).hex()
'666f6f62617200cf803432'
"""

from typing import Any

from binwrite.serializer import Serializer


def encode_utf8(serializer: Serializer, value: Any) -> None:
    """ Encodes the text as UTF-8, nothing else is written.
    """
    serializer.write_bytes(str(value).encode('utf-8'))


def encode_cstr(serializer: Serializer, value: Any) -> None:
    """ Encodes the text as UTF-8 followed by a single 0x00 terminator.
    """
    encode_utf8(serializer, value)
    serializer.write_byte(0x00)


def encode_char(serializer: Serializer, value: str) -> None:
    """ Encodes exactly one character as UTF-8, between 1 and 4 bytes.
    """
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f'expected a single character, got {value!r}')
    encode_utf8(serializer, value)
