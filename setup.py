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

import os

from setuptools import find_packages, setup

# read the version without importing the package, its dependencies may not be installed yet
version_ns: dict = {}
with open(os.path.join(os.path.dirname(__file__), 'canoser', 'version.py')) as fp:
    exec(fp.read(), version_ns)

setup(
    name='canoser',
    version=version_ns['__version__'],
    description='Canonical binary serialization of typed fields',
    author='Hathor Team',
    author_email='contact@hathor.network',
    license='Apache License 2.0',
    python_requires='>=3.10',
    install_requires=[
        'pydantic>=2',
        'PyYAML',
        'structlog',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('tests', 'tests.*')),
)
