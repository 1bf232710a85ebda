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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The byte order is always little-endian, independently of the platform.

>>> writer = Writer()
>>> encode_int(writer, 0, length=1, signed=True)  # writes 00
>>> encode_int(writer, 255, length=1, signed=False)  # writes ff
>>> encode_int(writer, 1234, length=2, signed=False)  # writes d204
>>> encode_int(writer, -1234, length=2, signed=True)  # writes 2efb
>>> writer.finalize().hex()
'00ffd2042efb'

>>> cursor = Cursor(bytes.fromhex('00ffd2042efb'))
>>> decode_int(cursor, length=1, signed=True)  # reads 00
0
>>> decode_int(cursor, length=1, signed=False)  # reads ff
255
>>> decode_int(cursor, length=2, signed=False)  # reads d204
1234
>>> decode_int(cursor, length=2, signed=True)  # reads 2efb
-1234
>>> cursor.finalize()
"""

from canoser.cursor import Cursor
from canoser.exceptions import FieldValueError
from canoser.writer import Writer

BYTE_ORDER = 'little'


def encode_int(writer: Writer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder=BYTE_ORDER, signed=signed)
    except OverflowError:
        raise FieldValueError(f'{number} does not fit in {length} bytes')
    writer.write_bytes(data)


def decode_int(cursor: Cursor, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = cursor.read_bytes(length)
    return int.from_bytes(data, byteorder=BYTE_ORDER, signed=signed)
