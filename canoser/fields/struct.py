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
A struct is an ordered list of named members, each of a known kind.

The encoding of a struct is the encoding of each member in declaration order, with no tags, lengths or padding
between them.

>>> from canoser.fields.bool import Bool
>>> from canoser.fields.sized_int import Uint8, Uint16
>>> class Point(Struct):
...     _fields = [('x', Uint8), ('y', Uint16), ('visible', Bool)]
>>> point = Point(x=5, y=256, visible=True)
>>> point.encode().hex()
'05000101'
>>> point['y']
Uint16(256)
>>> Point.from_bytes(bytes.fromhex('05000101')) == point
True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from structlog import get_logger
from typing_extensions import Self, override

from canoser.compound_encoding.tuple import encode_tuple
from canoser.cursor import Cursor
from canoser.exceptions import FieldTypeError, FieldValueError, SerializationError
from canoser.fields.field import Field, write_field
from canoser.writer import Writer

logger = get_logger()


class Struct(Field[dict[str, Field]]):
    """ Base class for structs, subclasses declare their members in `_fields`.

    Members can be given as a mapping or as keyword arguments, plain values are wrapped in the member kind.
    """

    __slots__ = ()

    # XXX: subclasses must override this with their (name, kind) pairs
    _fields: ClassVar[list[tuple[str, type[Field]]]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        seen: set[str] = set()
        for name, kind in cls._fields:
            if not (isinstance(kind, type) and issubclass(kind, Field)):
                raise FieldTypeError(f'member {name!r} of {cls.__name__} must be a Field kind, got {kind!r}')
            if name in seen:
                raise FieldValueError(f'{cls.__name__} declares member {name!r} more than once')
            seen.add(name)

    def __init__(self, members: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        given = dict(members or {})
        given.update(kwargs)
        value: dict[str, Field] = {}
        for name, kind in self._fields:
            if name not in given:
                raise FieldValueError(f'{type(self).__name__} is missing member {name!r}')
            member = given.pop(name)
            value[name] = member if isinstance(member, Field) else kind(member)
        if given:
            unknown = ', '.join(repr(name) for name in given)
            raise FieldValueError(f'{type(self).__name__} has no member {unknown}')
        super().__init__(value)

    def __getitem__(self, name: str) -> Field:
        return self._value[name]

    @override
    def _check_value(self, value: dict[str, Field], /) -> None:
        if not isinstance(value, dict):
            raise FieldTypeError(f'{type(self).__name__} expects a dict of members, got {type(value).__name__}')
        if value.keys() != {name for name, _ in self._fields}:
            raise FieldValueError(f'{type(self).__name__} members do not match its declared members')
        for name, kind in self._fields:
            member = value[name]
            if not isinstance(member, kind):
                raise FieldTypeError(f'member {name!r} expects {kind.__name__}, got {type(member).__name__}')

    @override
    def write(self, writer: Writer, /) -> None:
        members = tuple(self._value[name] for name, _ in self._fields)
        encode_tuple(writer, members, tuple(write_field for _ in members))

    @override
    @classmethod
    def decode(cls, cursor: Cursor, /) -> Self:
        members: dict[str, Field] = {}
        start = cursor.position
        for name, kind in cls._fields:
            try:
                members[name] = kind.decode(cursor)
            except SerializationError:
                logger.debug('struct member decode failed', struct=cls.__name__, member=name, position=cursor.position)
                cursor.rewind(start)
                raise
        return cls(members)

    @override
    def __hash__(self) -> int:
        return hash((type(self), tuple(self._value[name] for name, _ in self._fields)))

    @override
    def __repr__(self) -> str:
        members = ', '.join(f'{name}={self._value[name]!r}' for name, _ in self._fields)
        return f'{type(self).__name__}({members})'
