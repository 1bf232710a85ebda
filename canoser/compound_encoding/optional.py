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
An optional value is a presence flag encoded as a boolean, followed by the value only when it is present.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from canoser.encoding.utf8 import encode_utf8, decode_utf8
>>> writer = Writer()
>>> encode_optional(writer, 'foobar', encode_utf8)
>>> writer.finalize().hex()
'0106666f6f626172'

>>> writer = Writer()
>>> encode_optional(writer, None, encode_utf8)
>>> writer.finalize().hex()
'00'

>>> cursor = Cursor(bytes.fromhex('0106666f6f626172'))
>>> decode_optional(cursor, decode_utf8)
'foobar'
>>> cursor.finalize()

>>> cursor = Cursor(bytes.fromhex('00'))
>>> str(decode_optional(cursor, decode_utf8))
'None'
>>> cursor.finalize()
"""

from typing import Optional, TypeVar

from canoser.cursor import Cursor
from canoser.encoding.bool import decode_bool, encode_bool
from canoser.writer import Writer

from . import Decoder, Encoder

T = TypeVar('T')


def encode_optional(writer: Writer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        encode_bool(writer, False)
    else:
        encode_bool(writer, True)
        encoder(writer, value)


def decode_optional(cursor: Cursor, decoder: Decoder[T]) -> Optional[T]:
    has_value = decode_bool(cursor)
    if has_value:
        return decoder(cursor)
    else:
        return None
