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
Variable-length fields: a LEB128 length prefix followed by the payload.

>>> Bytes(b'test').encode().hex()
'0474657374'
>>> Str('π').encode().hex()
'02cf80'

Decoding is bounded by the limits in `canoser.conf.CanoserSettings`.
"""

from __future__ import annotations

from typing_extensions import Self, override

from canoser.conf import get_settings
from canoser.cursor import Cursor
from canoser.encoding.bytes import decode_bytes, encode_bytes
from canoser.encoding.utf8 import decode_utf8, encode_utf8
from canoser.exceptions import FieldTypeError, SerializationError
from canoser.fields.field import Field
from canoser.writer import Writer


class Bytes(Field[bytes]):
    __slots__ = ()

    @override
    def _check_value(self, value: bytes, /) -> None:
        if not isinstance(value, bytes):
            raise FieldTypeError(f'Bytes expects bytes, got {type(value).__name__}')

    @override
    def write(self, writer: Writer, /) -> None:
        encode_bytes(writer, self._value)

    @override
    @classmethod
    def decode(cls, cursor: Cursor, /) -> Self:
        settings = get_settings()
        start = cursor.position
        try:
            data = decode_bytes(
                cursor,
                max_length=settings.MAX_BYTES_LENGTH,
                max_prefix_bytes=settings.MAX_LEB128_BYTES,
            )
        except SerializationError:
            cursor.rewind(start)
            raise
        return cls(data)


class Str(Field[str]):
    __slots__ = ()

    @override
    def _check_value(self, value: str, /) -> None:
        if not isinstance(value, str):
            raise FieldTypeError(f'Str expects a str, got {type(value).__name__}')

    @override
    def write(self, writer: Writer, /) -> None:
        encode_utf8(writer, self._value)

    @override
    @classmethod
    def decode(cls, cursor: Cursor, /) -> Self:
        settings = get_settings()
        start = cursor.position
        try:
            value = decode_utf8(
                cursor,
                max_length=settings.MAX_BYTES_LENGTH,
                max_prefix_bytes=settings.MAX_LEB128_BYTES,
            )
        except SerializationError:
            cursor.rewind(start)
            raise
        return cls(value)
