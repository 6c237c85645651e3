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

# read the version without importing the package, its dependencies may not be installed yet
_version_file = Path(__file__).parent / 'binwrite' / 'version.py'
__version__ = re.search(r"^BASE_VERSION = '([^']+)'", _version_file.read_text(), re.M).group(1)

setup(
    name='binwrite',
    version=__version__,
    description='Encode typed values into declared binary layouts with per-field byte order control',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('binwrite', 'binwrite.*')),
    package_data={
        'binwrite.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2.0',
        'PyYAML>=6.0',
        'structlog>=22.3',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
)
