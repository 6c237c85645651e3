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


class SerializationError(Exception):
    """Base class for every failure an encode call can report."""


class SinkError(SerializationError):
    """ The sink refused to accept a write.

    The encoder never retries, the original failure (if any) is chained as `__cause__`. After this is raised the sink
    holds whatever was written before the failed write and should be discarded by the caller.
    """


class UnrepresentableLengthError(SerializationError):
    """ A declared length field cannot hold the actual element count of the value it describes.
    """

    def __init__(self, count: int, max_count: int) -> None:
        self.count = count
        self.max_count = max_count
        super().__init__(f'length {count} does not fit the length field (max {max_count})')


class ArrayLengthError(ValueError):
    """A fixed-length array was given a value with a different number of elements."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'fixed array expects {expected} elements, got {actual}')
