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

_EXTENDS_KEY = 'extends'

M = TypeVar('M', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Takes a filepath to a yaml file and returns a dictionary with its contents.

    An empty file results in an empty dict.
    """
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def merge_settings_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with the keys of `override` applied over `base`, nested dicts are merged key by key.

    >>> merge_settings_dicts({'A': 1, 'B': {'C': 2, 'D': 3}}, {'B': {'D': 4}, 'E': 5})
    {'A': 1, 'B': {'C': 2, 'D': 4}, 'E': 5}
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_settings_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def dict_from_extended_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Like `dict_from_yaml`, but a file may name another one to build upon with the 'extends' key.

    The extended path is relative to the extending file. The 'extends' key itself never appears in the result.
    """
    contents = dict_from_yaml(filepath=filepath)
    base_file = contents.pop(_EXTENDS_KEY, None)
    if not base_file:
        return contents

    base_filepath = Path(filepath).parent / str(base_file)
    if base_filepath.resolve() == Path(filepath).resolve():
        raise ValueError(f"'{filepath}' cannot extend itself")

    try:
        base_contents = dict_from_extended_yaml(filepath=base_filepath)
    except RecursionError as e:
        raise ValueError('Cannot parse yaml with recursive extensions.') from e

    return merge_settings_dicts(base_contents, contents)


def model_from_extended_yaml(model: type[M], *, filepath: Union[Path, str]) -> M:
    """Takes a pydantic model and a filepath to a yaml file and returns a validated model instance."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath))
