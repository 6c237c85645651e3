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

from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from binwrite.endian import Endian
from binwrite.utils import pydantic
from binwrite.utils.yaml import model_from_extended_yaml


class Settings(pydantic.BaseModel):
    # Byte order of the root scope when `encode()` isn't given one explicitly. `native` follows the host, so use an
    # explicit value whenever output must be identical across platforms.
    DEFAULT_ENDIAN: Endian = Endian.NATIVE

    # Capacity of the buffer used by `encode_to_bytes()`, `None` for unbounded.
    MAX_OUTPUT_BYTES: Optional[int] = None

    @field_validator('DEFAULT_ENDIAN', mode='before')
    @classmethod
    def _parse_endian(cls, value: Union[str, Endian]) -> Union[str, Endian]:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator('MAX_OUTPUT_BYTES')
    @classmethod
    def _validate_max_output_bytes(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError('MAX_OUTPUT_BYTES cannot be negative')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'Settings':
        """Takes a filepath to a yaml file and returns a validated Settings instance."""
        return model_from_extended_yaml(cls, filepath=filepath)
