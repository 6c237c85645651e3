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

from typing import IO

from typing_extensions import override

from .exceptions import SinkError
from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Sink that forwards every write to a binary stream (file, socket file, `io.BytesIO`, ...).

    The position is counted locally instead of asking the stream, so non-seekable streams work too. Any `OSError`
    from the stream, a short write, or a non-blocking stream that would block, is reported as `SinkError`.

    >>> import io
    >>> stream = io.BytesIO()
    >>> se = StreamSerializer(stream)
    >>> se.write_bytes(b'te')
    >>> se.write_byte(0x73)
    >>> se.cur_pos()
    3
    >>> stream.getvalue()
    b'tes'
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pos: int = 0

    @property
    def stream(self) -> IO[bytes]:
        return self._stream

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(int.to_bytes(data, length=1, byteorder='big'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        if self._stream.closed:
            raise SinkError('stream is closed')
        try:
            written = self._stream.write(view)
        except OSError as e:
            raise SinkError(f'stream rejected write at position {self._pos}') from e
        # non-blocking raw streams return None when nothing could be written
        if written is None:
            raise SinkError(f'stream would block at position {self._pos}')
        # raw streams are allowed to accept fewer bytes than requested
        if written != len(view):
            self._pos += written
            raise SinkError(f'short write at position {self._pos - written}: {written} of {len(view)} bytes')
        self._pos += len(view)

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise SinkError('stream flush failed') from e
