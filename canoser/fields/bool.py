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

from __future__ import annotations

from typing import ClassVar

from typing_extensions import Self, override

from canoser.cursor import Cursor
from canoser.encoding.bool import decode_bool, encode_bool
from canoser.exceptions import FieldTypeError, SerializationError
from canoser.fields.field import Field
from canoser.writer import Writer


class Bool(Field[bool]):
    """ Holds builtin `bool` values, `0x01` for True and `0x00` for False.
    """

    __slots__ = ()

    width: ClassVar[int] = 1

    @override
    def _check_value(self, value: bool, /) -> None:
        if not isinstance(value, bool):
            raise FieldTypeError(f'Bool expects a bool, got {type(value).__name__}')

    @override
    def write(self, writer: Writer, /) -> None:
        encode_bool(writer, self._value)

    @override
    @classmethod
    def decode(cls, cursor: Cursor, /) -> Self:
        start = cursor.position
        try:
            value = decode_bool(cursor)
        except SerializationError:
            cursor.rewind(start)
            raise
        return cls(value)
