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

import os
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from binwrite.conf.settings import Settings as BinwriteSettings

logger = get_logger()

CONFIG_YAML_ENV = 'BINWRITE_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: BinwriteSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> BinwriteSettings:
    """
    Returns the settings, loading them on first use.

    The yaml filepath is taken from the 'BINWRITE_CONFIG_YAML' env var, when it isn't set the packaged default.yml is
    used.
    """
    default_filepath = str(Path(__file__).parent / 'default.yml')
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV, default_filepath)
    return _load_settings_singleton(settings_yaml_filepath)


def _load_settings_singleton(source: str) -> BinwriteSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    logger.info('loading settings', source=source)
    _settings_singleton = _SettingsMetadata(
        source=source,
        settings=BinwriteSettings.from_yaml(filepath=source),
    )

    return _settings_singleton.settings
