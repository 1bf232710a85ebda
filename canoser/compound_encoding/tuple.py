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
A tuple of known length and heterogeneous types has no "format" per-se, the encoding of `(A, B, C)` is just the
encoding of A concatenated with B concatenated with C. This is what struct members are encoded with.

>>> from canoser.encoding.utf8 import encode_utf8, decode_utf8
>>> from canoser.encoding.bool import encode_bool, decode_bool
>>> from canoser.encoding.bytes import decode_bytes, encode_bytes
>>> writer = Writer()
>>> values = ('foobar', False, b'test')
>>> encode_tuple(writer, values, (encode_utf8, encode_bool, encode_bytes))
>>> writer.finalize().hex()
'06666f6f626172000474657374'

Breakdown of the result:

    06666f6f626172: 'foobar'
    00: False
    0474657374: b'test'

>>> cursor = Cursor(bytes.fromhex('06666f6f626172000474657374'))
>>> decode_tuple(cursor, (decode_utf8, decode_bool, decode_bytes))
('foobar', False, b'test')
"""

from typing import Any

from canoser.cursor import Cursor
from canoser.writer import Writer

from . import Decoder, Encoder


def encode_tuple(writer: Writer, values: tuple[Any, ...], encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    for value, encoder in zip(values, encoders):
        encoder(writer, value)


def decode_tuple(cursor: Cursor, decoders: tuple[Decoder[Any], ...]) -> tuple[Any, ...]:
    return tuple(decoder(cursor) for decoder in decoders)
