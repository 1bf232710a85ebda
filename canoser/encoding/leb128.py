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
This module implements unsigned LEB128, used as the length prefix of every variable-length value.

LEB128 or Little Endian Base 128 is a variable-length code compression used to store arbitrarily large
integers in a small number of bytes. Each byte holds 7 bits of data, the high bit is set when more bytes follow.

References:
- https://en.wikipedia.org/wiki/LEB128
- https://webassembly.github.io/spec/core/binary/values.html#integers

Only the shortest encoding of a value is accepted when decoding, so every value has exactly one representation.

>>> writer = Writer()
>>> writer.write_bytes(b'test')  # writes 74657374
>>> encode_leb128(writer, 0)  # writes 00
>>> encode_leb128(writer, 127)  # writes 7f
>>> encode_leb128(writer, 128)  # writes 8001
>>> encode_leb128(writer, 624485)  # writes e58e26
>>> writer.finalize().hex()
'74657374007f8001e58e26'

>>> cursor = Cursor(bytes.fromhex('00 7f 8001 e58e26 74657374'))
>>> decode_leb128(cursor)  # reads 00
0
>>> decode_leb128(cursor)  # reads 7f
127
>>> decode_leb128(cursor)  # reads 8001
128
>>> decode_leb128(cursor)  # reads e58e26
624485
>>> bytes(cursor.read_all())  # reads 74657374
b'test'
>>> cursor.finalize()

>>> cursor = Cursor(bytes.fromhex('8000'))
>>> try:
...     decode_leb128(cursor)
... except MalformedValueError as e:
...     print(*e.args)
non-canonical LEB128 encoding

>>> cursor = Cursor(bytes.fromhex('ffffffff0f'))
>>> try:
...     decode_leb128(cursor, max_bytes=4)
... except TooLongError as e:
...     print(*e.args)
LEB128 encoding longer than 4 bytes
"""

from typing import Optional

from canoser.cursor import Cursor
from canoser.exceptions import FieldValueError, MalformedValueError, TooLongError
from canoser.writer import Writer


def encode_leb128(writer: Writer, value: int) -> None:
    """ Encodes a non-negative integer using unsigned LEB128.

    This module's docstring has more details on LEB128 and examples.
    """
    if value < 0:
        raise FieldValueError('cannot encode value <0 as unsigned')
    while True:
        byte = value & 0b0111_1111
        value >>= 7
        if value == 0:
            writer.write_byte(byte)
            break
        writer.write_byte(byte | 0b1000_0000)


def decode_leb128(cursor: Cursor, *, max_bytes: Optional[int] = None) -> int:
    """ Decodes an unsigned LEB128-encoded integer.

    If `max_bytes` is given, encodings that take more bytes than that raise `TooLongError`. Encodings with redundant
    trailing zero groups raise `MalformedValueError`.

    This module's docstring has more details on LEB128 and examples.
    """
    result = 0
    shift = 0
    n_bytes = 0
    while True:
        if max_bytes is not None and n_bytes >= max_bytes:
            raise TooLongError(f'LEB128 encoding longer than {max_bytes} bytes')
        byte = cursor.read_byte()
        n_bytes += 1
        result |= (byte & 0b0111_1111) << shift
        shift += 7
        if (byte & 0b1000_0000) == 0:
            if byte == 0 and n_bytes > 1:
                raise MalformedValueError('non-canonical LEB128 encoding')
            return result
