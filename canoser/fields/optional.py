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
An optional field is either absent or holds one field of a known inner kind.

Layout:

    [0x00] when absent
    [0x01][inner field] when present

The encoding carries no type tag, the inner kind must be known to decode it. It can be given on each call, or bound
once with `Optional.of`, which makes a kind that can be nested in sequences and structs.

>>> from canoser.fields.sized_int import Uint8, Uint32
>>> Optional(None, Uint32).encode().hex()
'00'
>>> Optional(Uint8(42)).encode().hex()
'012a'
>>> Optional.decode(Cursor(b'\x01\x2a'), Uint8)
Optional[Uint8](Uint8(42))
>>> OptionalUint8 = Optional.of(Uint8)
>>> OptionalUint8(42) == Optional(Uint8(42))
True
>>> OptionalUint8.from_bytes(b'\x00').is_present
False
"""

from __future__ import annotations

from functools import cache
from typing import Any, ClassVar

from typing_extensions import Self, override

from canoser.compound_encoding.optional import decode_optional, encode_optional
from canoser.cursor import Cursor
from canoser.exceptions import FieldTypeError, SerializationError
from canoser.fields.field import Field, write_field
from canoser.writer import Writer


class Optional(Field['Field | None']):
    """ Either `None` (absent) or an instance of the inner kind (present).
    """

    __slots__ = ('_kind',)

    # set by Optional.of() on the kinds it builds
    kind: ClassVar[type[Field] | None] = None

    _kind: type[Field]

    def __init__(self, value: Any = None, kind: type[Field] | None = None, /) -> None:
        bound_kind = type(self).kind
        if kind is None:
            kind = bound_kind
        if kind is None and isinstance(value, Field):
            kind = type(value)
        if kind is None:
            raise FieldTypeError('the inner field kind is required')
        if bound_kind is not None and kind is not bound_kind:
            raise FieldTypeError(f'{type(self).__name__} cannot hold a {kind.__name__}')
        if value is not None and not isinstance(value, Field):
            value = kind(value)
        self._kind = kind
        super().__init__(value)

    @classmethod
    def of(cls, kind: type[Field], /) -> type[Optional]:
        """ The optional kind bound to `kind`, the same class is returned for the same inner kind.
        """
        return _optional_of(kind)

    @property
    def inner_kind(self) -> type[Field]:
        return self._kind

    @property
    def is_present(self) -> bool:
        return self._value is not None

    @override
    def _check_value(self, value: Field | None, /) -> None:
        if value is not None and not isinstance(value, self._kind):
            raise FieldTypeError(f'expected {self._kind.__name__}, got {type(value).__name__}')

    @override
    def write(self, writer: Writer, /) -> None:
        encode_optional(writer, self._value, write_field)

    @override
    @classmethod
    def decode(cls, cursor: Cursor, kind: type[Field] | None = None, /) -> Self:
        if kind is None:
            kind = cls.kind
        if kind is None:
            raise FieldTypeError('the inner field kind is required')
        start = cursor.position
        try:
            value = decode_optional(cursor, kind.decode)
        except SerializationError:
            cursor.rewind(start)
            raise
        return cls(value, kind)

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    @override
    def __hash__(self) -> int:
        return hash((Optional, self._kind, self._value))

    @override
    def __repr__(self) -> str:
        return f'Optional[{self._kind.__name__}]({self._value!r})'


@cache
def _optional_of(kind: type[Field]) -> type[Optional]:
    if not (isinstance(kind, type) and issubclass(kind, Field)):
        raise FieldTypeError(f'expected a Field kind, got {kind!r}')
    return type(f'Optional[{kind.__name__}]', (Optional,), {'__slots__': (), 'kind': kind})
