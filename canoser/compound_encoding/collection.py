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
A collection is basically any value that has a known size and is iterable.

Layout: [N: unsigned leb128][value_0]...[value_N-1]

>>> from canoser.encoding.utf8 import encode_utf8, decode_utf8
>>> writer = Writer()
>>> value = ['foobar', 'π', 'test']
>>> encode_collection(writer, value, encode_utf8)
>>> writer.finalize().hex()
'0306666f6f62617202cf800474657374'

Breakdown of the result:

    03: 3 in leb128, the total length
    06666f6f626172: 'foobar' (with length prefix)
    02cf80: 'π' (with length prefix)
    0474657374: 'test' (with length prefix)

When decoding, the builder can be any compatible collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`.

>>> cursor = Cursor(bytes.fromhex('0306666f6f62617202cf800474657374'))
>>> decode_collection(cursor, decode_utf8, tuple)
('foobar', 'π', 'test')
>>> cursor.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, Optional, TypeVar

from canoser.cursor import Cursor
from canoser.encoding.bytes import decode_length
from canoser.encoding.leb128 import encode_leb128
from canoser.writer import Writer

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(writer: Writer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_leb128(writer, len(values))
    for value in values:
        encoder(writer, value)


def decode_collection(
    cursor: Cursor,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: Optional[int] = None,
    max_prefix_bytes: Optional[int] = None,
) -> R:
    length = decode_length(cursor, max_length=max_length, max_prefix_bytes=max_prefix_bytes)
    return builder(decoder(cursor) for _ in range(length))
