#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from pathlib import Path

import pytest

from enumjson.utils.yaml import dict_from_extended_yaml, dict_from_yaml


def _get_absolute_filepath(filepath: str) -> Path:
    parent_dir = Path(__file__).parent

    return parent_dir / 'fixtures' / filepath


def test_dict_from_yaml_invalid_filepath():
    with pytest.raises(ValueError) as e:
        dict_from_yaml(filepath='fake_file.yml')

    assert str(e.value) == "'fake_file.yml' is not a file"


def test_dict_from_yaml_empty():
    assert dict_from_yaml(filepath=_get_absolute_filepath('empty.yml')) == {}


def test_dict_from_yaml_not_a_dict():
    filepath = _get_absolute_filepath('list.yml')
    with pytest.raises(ValueError) as e:
        dict_from_yaml(filepath=filepath)

    assert str(e.value) == f"'{filepath}' cannot be parsed as a dictionary"


def test_dict_from_yaml_keeps_extends_key():
    contents = dict_from_yaml(filepath=_get_absolute_filepath('nested_extends.yml'))

    assert contents == {'extends': 'nested_base.yml', 'b': {'d': 4}, 'e': 5}


def test_dict_from_extended_yaml_merges_nested():
    contents = dict_from_extended_yaml(filepath=_get_absolute_filepath('nested_extends.yml'))

    assert contents == {'a': 1, 'b': {'c': 2, 'd': 4}, 'e': 5}


def test_dict_from_extended_yaml_without_extends():
    contents = dict_from_extended_yaml(filepath=_get_absolute_filepath('nested_base.yml'))

    assert contents == {'a': 1, 'b': {'c': 2, 'd': 3}}


def test_dict_from_extended_yaml_self_extends():
    with pytest.raises(ValueError, match='cannot extend itself'):
        dict_from_extended_yaml(filepath=_get_absolute_filepath('self_extends.yml'))


def test_dict_from_extended_yaml_missing_base(tmp_path: Path):
    filepath = tmp_path / 'orphan.yml'
    filepath.write_text('extends: missing.yml\n')

    with pytest.raises(ValueError, match='is not a file'):
        dict_from_extended_yaml(filepath=filepath)
