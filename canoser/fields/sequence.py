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
A sequence of fields of the same kind.

Layout: [N: unsigned leb128][field_0]...[field_N-1]

>>> from canoser.fields.sized_int import Uint16
>>> Uint16s = Sequence.of(Uint16)
>>> Uint16s([1, 256]).encode().hex()
'0201000001'
>>> Uint16s([]).encode().hex()
'00'
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cache
from typing import Any, ClassVar

from typing_extensions import Self, override

from canoser.compound_encoding.collection import decode_collection, encode_collection
from canoser.conf import get_settings
from canoser.cursor import Cursor
from canoser.exceptions import FieldTypeError, SerializationError
from canoser.fields.field import Field, write_field
from canoser.writer import Writer


class Sequence(Field[tuple[Field, ...]]):
    """ Holds a tuple of fields, all of the element kind.

    Plain values are wrapped in the element kind when the sequence is built.
    """

    __slots__ = ('_kind',)

    # set by Sequence.of() on the kinds it builds
    kind: ClassVar[type[Field] | None] = None

    _kind: type[Field]

    def __init__(self, values: Iterable[Any], kind: type[Field] | None = None, /) -> None:
        bound_kind = type(self).kind
        if kind is None:
            kind = bound_kind
        if kind is None:
            raise FieldTypeError('the element field kind is required')
        if bound_kind is not None and kind is not bound_kind:
            raise FieldTypeError(f'{type(self).__name__} cannot hold a {kind.__name__}')
        self._kind = kind
        super().__init__(tuple(v if isinstance(v, Field) else kind(v) for v in values))

    @classmethod
    def of(cls, kind: type[Field], /) -> type[Sequence]:
        """ The sequence kind bound to `kind`, the same class is returned for the same element kind.
        """
        return _sequence_of(kind)

    @property
    def element_kind(self) -> type[Field]:
        return self._kind

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, index: int) -> Field:
        return self._value[index]

    @override
    def _check_value(self, value: tuple[Field, ...], /) -> None:
        if not isinstance(value, tuple):
            raise FieldTypeError(f'{type(self).__name__} expects a tuple of fields, got {type(value).__name__}')
        for item in value:
            if not isinstance(item, self._kind):
                raise FieldTypeError(f'expected {self._kind.__name__}, got {type(item).__name__}')

    @override
    def write(self, writer: Writer, /) -> None:
        encode_collection(writer, self._value, write_field)

    @override
    @classmethod
    def decode(cls, cursor: Cursor, kind: type[Field] | None = None, /) -> Self:
        if kind is None:
            kind = cls.kind
        if kind is None:
            raise FieldTypeError('the element field kind is required')
        settings = get_settings()
        start = cursor.position
        try:
            items = decode_collection(
                cursor,
                kind.decode,
                tuple,
                max_length=settings.MAX_SEQUENCE_LENGTH,
                max_prefix_bytes=settings.MAX_LEB128_BYTES,
            )
        except SerializationError:
            cursor.rewind(start)
            raise
        return cls(items, kind)

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    @override
    def __hash__(self) -> int:
        return hash((Sequence, self._kind, self._value))

    @override
    def __repr__(self) -> str:
        return f'Sequence[{self._kind.__name__}]({list(self._value)!r})'


@cache
def _sequence_of(kind: type[Field]) -> type[Sequence]:
    if not (isinstance(kind, type) and issubclass(kind, Field)):
        raise FieldTypeError(f'expected a Field kind, got {kind!r}')
    return type(f'Sequence[{kind.__name__}]', (Sequence,), {'__slots__': (), 'kind': kind})
