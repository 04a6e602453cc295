#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup


def _read_version() -> str:
    # XXX: enumjson/__init__.py imports the runtime dependencies, which may not be installed yet
    version_file = Path(__file__).parent / 'enumjson' / 'version.py'
    match = re.search(r"^__version__ = '([^']+)'", version_file.read_text(), re.MULTILINE)
    assert match is not None, 'version not found'
    return match.group(1)


setup(
    name='enumjson',
    version=_read_version(),
    description='Enum name codecs for JSON, with empty-string-as-absent support for optional enums',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('enumjson', 'enumjson.*')),
    package_data={
        'enumjson.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2,<3',
        'PyYAML>=6',
        'structlog>=23',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'tests': ['pytest>=7'],
    },
)
