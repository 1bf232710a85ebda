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

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, final

from typing_extensions import Self

from canoser.cursor import Cursor
from canoser.types import Buffer
from canoser.writer import Writer

T = TypeVar('T')


class Field(ABC, Generic[T]):
    """ A single logical value of a known kind and how it is (de)serialized.

    Each concrete subclass is one kind (Uint8, Bool, Optional, ...). An instance holds one value of that kind, either
    given directly to be encoded, or produced by `decode`. The value is checked when the instance is built and whenever
    `value` is replaced, so a Field always holds a value its kind can encode.

    Kinds are not self-describing: whoever decodes must already know which kind comes next in the buffer.
    """

    __slots__ = ('_value',)

    def __init__(self, value: T, /) -> None:
        self._check_value(value)
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        """ Replace the held value, it is checked the same way as in the constructor.
        """
        self._check_value(value)
        self._value = value

    @final
    def encode(self) -> bytes:
        """ Shortcut to get the encoding of this field as `bytes`.
        """
        writer = Writer()
        self.write(writer)
        return writer.finalize()

    @final
    @classmethod
    def from_bytes(cls, data: Buffer, /) -> Self:
        """ Decode exactly one field of this kind from `data`, every byte must be consumed.
        """
        cursor = Cursor(data)
        field = cls.decode(cursor)
        cursor.finalize()
        return field

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Raise FieldTypeError or FieldValueError if the value can't be held by this kind.
        """
        raise NotImplementedError

    @abstractmethod
    def write(self, writer: Writer, /) -> None:
        """ Write the encoding of the held value. Compound fields call this on their members.
        """
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def decode(cls, cursor: Cursor, /) -> Self:
        """ Build a new field consuming exactly the bytes that encode it.

        Raises UnderflowError if the cursor runs out of bytes, or MalformedValueError if the bytes are not a legal
        value. Nothing is built when it fails.
        """
        raise NotImplementedError

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'


def write_field(writer: Writer, field: Field, /) -> None:
    """ Adapter to use a field as an `Encoder` in compound encoders.
    """
    field.write(writer)
