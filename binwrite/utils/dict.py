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

from typing import Any


def deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> None:
    """ Apply `overrides` on top of `base`, in place.

    Nested dicts are merged key by key, anything else in `overrides` replaces the value in `base`. This is how a
    settings file that `extends` another one only needs to list the options it changes.

    >>> base = dict(DEFAULT_ENDIAN='big', nested=dict(a=1, b=2))
    >>> deep_merge(base, dict(nested=dict(b=3), MAX_OUTPUT_BYTES=8))
    >>> base == dict(DEFAULT_ENDIAN='big', nested=dict(a=1, b=3), MAX_OUTPUT_BYTES=8)
    True
    """
    for key, value in overrides.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            deep_merge(current, value)
        else:
            base[key] = value
