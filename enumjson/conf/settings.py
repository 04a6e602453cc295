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
from typing import Union

from enumjson.utils.pydantic import BaseModel


class EnumJsonSettings(BaseModel):
    """Knobs for the enum name codecs.

    Defaults follow the wire contract: enums are written by name and an optional enum field reads both `null` and `""`
    as absent.
    """

    # An optional enum field reads the empty string as absent. When disabled, `""` is looked up like any other name and
    # fails as an unknown member.
    EMPTY_STRING_IS_ABSENT: bool = True

    # An optional enum field reads strings made only of whitespace as absent, like `"  "`.
    BLANK_STRING_IS_ABSENT: bool = False

    # Keep built name tables in the registry. When disabled tables are rebuilt on every lookup.
    CACHE_NAME_TABLES: bool = True

    def is_absent_string(self, value: str) -> bool:
        """Whether an optional enum field should read the given string as absent."""
        if value == '':
            return self.EMPTY_STRING_IS_ABSENT
        return self.BLANK_STRING_IS_ABSENT and value.isspace()

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'EnumJsonSettings':
        """Takes a filepath to a yaml file and returns a validated EnumJsonSettings instance."""
        from enumjson.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath)
