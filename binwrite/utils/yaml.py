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
from typing import Any, TypeVar, Union

import yaml
from pydantic import BaseModel

from binwrite.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Takes a filepath to a yaml file and returns a dictionary with its contents."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}

    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """ Like `dict_from_yaml()`, but follows the 'extends' key.

    'extends' names another yaml file, either absolute or relative to the directory of `filepath`. That file is loaded
    first (following its own 'extends') and the options of `filepath` are merged on top of it. The 'extends' key
    itself is not part of the result.
    """
    contents = dict_from_yaml(filepath=filepath)
    base_file = contents.pop(_EXTENDS_KEY, None)

    if not base_file:
        return contents

    try:
        merged = dict_from_extended_yaml(filepath=Path(filepath).parent / str(base_file))
    except RecursionError as e:
        raise ValueError(f"'{filepath}' extends itself") from e

    deep_merge(merged, contents)
    return merged


def model_from_extended_yaml(model: type[T], *, filepath: Union[Path, str]) -> T:
    """Takes a pydantic model and a filepath to a yaml file and returns a validated model instance."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath))
