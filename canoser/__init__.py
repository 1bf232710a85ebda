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

"""
Canonical binary serialization of typed fields.

Every kind of field has exactly one encoding for each value, so equal values always produce equal bytes. Integers are
little-endian, booleans are one byte, and variable-length values carry a LEB128 length prefix.

>>> from canoser import Cursor, Uint8, Uint16
>>> cursor = Cursor(bytes([0x05, 0x00, 0x01]))
>>> Uint8.decode(cursor).value
5
>>> Uint16.decode(cursor).value
256
>>> cursor.finalize()
"""

from canoser.cursor import Cursor
from canoser.exceptions import (
    CanoserError,
    FieldTypeError,
    FieldValueError,
    MalformedValueError,
    SerializationError,
    TooLongError,
    TrailingDataError,
    UnderflowError,
)
from canoser.fields import (
    Bool,
    Bytes,
    Field,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    Optional,
    Sequence,
    Str,
    Struct,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
)
from canoser.version import __version__
from canoser.writer import Writer

__all__ = [
    'Cursor',
    'Writer',
    'Field',
    'Bool',
    'Bytes',
    'Str',
    'Optional',
    'Sequence',
    'Struct',
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'Int128',
    'Uint8',
    'Uint16',
    'Uint32',
    'Uint64',
    'Uint128',
    'CanoserError',
    'SerializationError',
    'UnderflowError',
    'MalformedValueError',
    'TrailingDataError',
    'TooLongError',
    'FieldTypeError',
    'FieldValueError',
    '__version__',
]
