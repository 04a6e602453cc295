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

import json as _json
from typing import Any


def json_dumps(obj: Any) -> str:
    """Compact formatting of obj as JSON to a string, non-ASCII characters are kept as is.

    >>> json_dumps({'Access1': 'Read', 'Access2': None})
    '{"Access1":"Read","Access2":null}'
    """
    return _json.dumps(obj, separators=(',', ':'), ensure_ascii=False)


def json_loads(data: str | bytes) -> Any:
    """Parse a JSON document, accepts UTF-8 encoded bytes as well as a string."""
    return _json.loads(data)
