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

from typing import TypeVar

from typing_extensions import override

from binwrite.exceptions import SinkError
from binwrite.serializer import Serializer

from ..types import Buffer
from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class MaxBytesExceededError(SinkError):
    """ This error is raised when the adapted serializer reached its maximum bytes write.

    The write that would cross the limit is rejected whole, nothing of it reaches the inner serializer. Everything
    written before it is kept, so the inner serializer holds a truncated encoding and should be considered a failed
    serialization overall, not simply a failed write.
    """

    def __init__(self, max_bytes: int) -> None:
        self.max_bytes = max_bytes
        super().__init__(f'cannot write more than {max_bytes} bytes')


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """Sink with a fixed capacity, useful to model bounded buffers."""

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        if write_size > self._bytes_left:
            raise MaxBytesExceededError(self._max_bytes)
        self._bytes_left -= write_size

    @property
    def bytes_left(self) -> int:
        return self._bytes_left

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(data_view.nbytes)
        super().write_bytes(data_view)
