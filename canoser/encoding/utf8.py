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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`.

>>> writer = Writer()
>>> encode_utf8(writer, 'foobar')  # writes 06666f6f626172
>>> encode_utf8(writer, 'π')  # writes 02cf80
>>> writer.finalize().hex()
'06666f6f62617202cf80'

>>> cursor = Cursor(bytes.fromhex('06666f6f62617202cf80'))
>>> decode_utf8(cursor)  # reads 06666f6f626172
'foobar'
>>> decode_utf8(cursor)  # reads 02cf80
'π'
>>> cursor.finalize()

>>> cursor = Cursor(bytes.fromhex('01ff'))
>>> try:
...     decode_utf8(cursor)
... except MalformedValueError as e:
...     print(*e.args)
invalid utf-8 string
"""

from typing import Optional

from canoser.cursor import Cursor
from canoser.exceptions import MalformedValueError
from canoser.writer import Writer

from .bytes import decode_bytes, encode_bytes


def encode_utf8(writer: Writer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    encode_bytes(writer, data)


def decode_utf8(
    cursor: Cursor,
    *,
    max_length: Optional[int] = None,
    max_prefix_bytes: Optional[int] = None,
) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    data = decode_bytes(cursor, max_length=max_length, max_prefix_bytes=max_prefix_bytes)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedValueError('invalid utf-8 string') from e
