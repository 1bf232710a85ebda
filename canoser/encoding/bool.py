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

r"""
This module implements encoding a boolean value using 1 byte.

The format is trivial and extremely simple:

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`
- any other byte value is invalid

>>> writer = Writer()
>>> encode_bool(writer, False)
>>> writer.finalize()
b'\x00'

>>> writer = Writer()
>>> encode_bool(writer, True)
>>> writer.finalize()
b'\x01'

>>> cursor = Cursor(b'\x00')
>>> decode_bool(cursor)
False
>>> cursor.finalize()

>>> cursor = Cursor(b'\x01')
>>> decode_bool(cursor)
True
>>> cursor.finalize()

>>> cursor = Cursor(b'\x02')
>>> try:
...     decode_bool(cursor)
... except MalformedValueError as e:
...     print(*e.args)
b'\x02' is not a valid boolean

>>> cursor = Cursor(b'\x01test')
>>> decode_bool(cursor)
True
>>> bytes(cursor.read_all())
b'test'
"""

from canoser.cursor import Cursor
from canoser.exceptions import MalformedValueError
from canoser.writer import Writer


def encode_bool(writer: Writer, value: bool) -> None:
    """ Encodes a boolean value using 1 byte.
    """
    assert isinstance(value, bool)
    writer.write_byte(0x01 if value else 0x00)


def decode_bool(cursor: Cursor) -> bool:
    """ Decodes a boolean value from 1 byte.
    """
    i = cursor.read_byte()
    if i == 0:
        return False
    elif i == 1:
        return True
    else:
        raw = bytes([i])
        raise MalformedValueError(f'{raw!r} is not a valid boolean')
