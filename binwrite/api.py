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
Entry points for encoding a value with a layout.

>>> from binwrite.layout import I32, Tuple
>>> se = Serializer.build_bytes_serializer()
>>> encode(Tuple(I32, I32), (1, -2), se, endian=Endian.LITTLE)
Ok(8)
>>> bytes(se.finalize()).hex(' ')
'01 00 00 00 fe ff ff ff'
"""

from typing import Any, Optional

from structlog import get_logger

from binwrite.endian import Endian
from binwrite.exceptions import SerializationError
from binwrite.layout import Layout
from binwrite.serializer import Serializer
from binwrite.utils.result import Err, Ok, Result

logger = get_logger()


def _default_endian() -> Endian:
    from binwrite.conf import get_global_settings
    return get_global_settings().DEFAULT_ENDIAN


def encode(
    layout: Layout,
    value: Any,
    serializer: Serializer,
    *,
    endian: Optional[Endian] = None,
) -> Result[int, SerializationError]:
    """ Write `value` to `serializer` following `layout`.

    `endian` is the byte order of the root scope, when omitted the configured `DEFAULT_ENDIAN` is used. Returns
    `Ok(n)` with the number of bytes written, or `Err(error)` with the first failure. Nothing is rolled back on
    failure, the bytes written before it stay in the serializer, which should be discarded.

    Mistakes in the value itself (wrong type, integer out of range, fixed array of the wrong size) are not encode
    failures and are raised.
    """
    root_endian = endian if endian is not None else _default_endian()
    log = logger.new(layout=str(layout), endian=root_endian.value)
    start = serializer.cur_pos()
    try:
        layout.encode(serializer, value, root_endian)
    except SerializationError as e:
        log.warn('encode failed', reason=repr(e), bytes_written=serializer.cur_pos() - start)
        return Err(e)
    bytes_written = serializer.cur_pos() - start
    log.debug('encode finished', bytes_written=bytes_written)
    return Ok(bytes_written)


def encode_to_bytes(layout: Layout, value: Any, *, endian: Optional[Endian] = None) -> bytes:
    """ Encode into a fresh in-memory buffer and return its contents.

    The buffer is capped at the configured `MAX_OUTPUT_BYTES`. Failures are raised instead of returned, since there
    is no partially written sink left for the caller to inspect.

    >>> from binwrite.layout import U16
    >>> encode_to_bytes(U16, 0x0102, endian=Endian.BIG)
    b'\\x01\\x02'
    """
    from binwrite.conf import get_global_settings
    settings = get_global_settings()
    serializer = Serializer.build_bytes_serializer()
    result = encode(layout, value, serializer.with_optional_max_bytes(settings.MAX_OUTPUT_BYTES), endian=endian)
    result.unwrap_or_raise()
    return bytes(serializer.finalize())
