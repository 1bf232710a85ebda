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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a LEB128
unsigned integer.

>>> writer = Writer()
>>> encode_bytes(writer, b'test')  # will prepend b'\x04' before writing b'test'
>>> writer.finalize().hex()
'0474657374'

>>> writer = Writer()
>>> raw_data = b'test' * 32
>>> len(raw_data)
128
>>> encode_bytes(writer, raw_data)  # prepends b'\x80\x01' before raw_data
>>> encoded_data = writer.finalize()
>>> len(encoded_data)
130
>>> encoded_data[:10].hex()
'80017465737474657374'

>>> cursor = Cursor(encoded_data)  # that we encoded before
>>> decoded_data = decode_bytes(cursor)
>>> cursor.finalize()  # called to assert we've consumed everything
>>> decoded_data == raw_data
True
>>> decoded_data[:8]
b'testtest'

>>> cursor = Cursor(b'\x04testfoo')
>>> _ = decode_bytes(cursor)
>>> try:
...     cursor.finalize()
... except TrailingDataError as e:
...     print(*e.args)
trailing data: 3 bytes left

>>> cursor = Cursor(b'\x04test')
>>> try:
...     decode_bytes(cursor, max_length=3)
... except TooLongError as e:
...     print(*e.args)
length 4 is above the maximum of 3
>>> cursor.position  # only the length prefix was consumed
1
"""

from typing import Optional

from canoser.cursor import Cursor
from canoser.exceptions import TooLongError, TrailingDataError  # noqa: F401
from canoser.types import Buffer
from canoser.writer import Writer

from .leb128 import decode_leb128, encode_leb128


def decode_length(cursor: Cursor, *, max_length: Optional[int] = None, max_prefix_bytes: Optional[int] = None) -> int:
    """ Decodes a LEB128 length prefix and checks it against `max_length`.
    """
    size = decode_leb128(cursor, max_bytes=max_prefix_bytes)
    if max_length is not None and size > max_length:
        raise TooLongError(f'length {size} is above the maximum of {max_length}')
    return size


def encode_bytes(writer: Writer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray, memoryview))
    encode_leb128(writer, len(data))
    writer.write_bytes(data)


def decode_bytes(
    cursor: Cursor,
    *,
    max_length: Optional[int] = None,
    max_prefix_bytes: Optional[int] = None,
) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_length(cursor, max_length=max_length, max_prefix_bytes=max_prefix_bytes)
    return bytes(cursor.read_bytes(size))
