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
This modules implements writing a byte sequence verbatim.

There is no length prefix, the size is whatever the enclosing layout says it is.

>>> se = Serializer.build_bytes_serializer()
>>> encode_raw_bytes(se, b'test')
>>> encode_raw_bytes(se, bytearray(b'\x00\x01'))
>>> bytes(se.finalize()).hex()
'746573740001'
"""

from binwrite.serializer import Serializer
from binwrite.types import Buffer


def encode_raw_bytes(serializer: Serializer, value: Buffer) -> None:
    if isinstance(value, str):
        raise TypeError('expected a bytes-like value, got str')
    serializer.write_bytes(value)
