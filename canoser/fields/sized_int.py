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
Integer fields with a fixed width, encoded in little-endian order.

>>> Uint16(256).encode().hex()
'0001'
>>> Uint32.from_bytes(bytes.fromhex('2a000000'))
Uint32(42)
>>> Int8(-1).encode().hex()
'ff'
>>> try:
...     Uint8(256)
... except FieldValueError as e:
...     print(*e.args)
256 is above the upper bound of Uint8 (255)
"""

from __future__ import annotations

from typing import ClassVar

from typing_extensions import Self, override

from canoser.cursor import Cursor
from canoser.encoding.int import decode_int, encode_int
from canoser.exceptions import FieldTypeError, FieldValueError
from canoser.fields.field import Field
from canoser.writer import Writer


class _SizedInt(Field[int]):
    """ Base class for fields that hold builtin `int` values with a fixed size and signedness.
    """

    __slots__ = ()

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    width: ClassVar[int]

    @classmethod
    def upper_bound(cls) -> int:
        if cls._signed:
            return 2**(cls.width * 8 - 1) - 1
        else:
            return 2**(cls.width * 8) - 1

    @classmethod
    def lower_bound(cls) -> int:
        if cls._signed:
            return -(2**(cls.width * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /) -> None:
        # bool is a subclass of int, but a Bool field must be used for it
        if not isinstance(value, int) or isinstance(value, bool):
            raise FieldTypeError(f'{type(self).__name__} expects an int, got {type(value).__name__}')
        upper_bound = self.upper_bound()
        lower_bound = self.lower_bound()
        if value > upper_bound:
            raise FieldValueError(f'{value} is above the upper bound of {type(self).__name__} ({upper_bound})')
        if value < lower_bound:
            raise FieldValueError(f'{value} is below the lower bound of {type(self).__name__} ({lower_bound})')

    @override
    def write(self, writer: Writer, /) -> None:
        encode_int(writer, self._value, length=self.width, signed=self._signed)

    @override
    @classmethod
    def decode(cls, cursor: Cursor, /) -> Self:
        return cls(decode_int(cursor, length=cls.width, signed=cls._signed))


class Uint8(_SizedInt):
    __slots__ = ()
    _signed = False
    width = 1


class Uint16(_SizedInt):
    __slots__ = ()
    _signed = False
    width = 2


class Uint32(_SizedInt):
    __slots__ = ()
    _signed = False
    width = 4


class Uint64(_SizedInt):
    __slots__ = ()
    _signed = False
    width = 8


class Uint128(_SizedInt):
    __slots__ = ()
    _signed = False
    width = 16


class Int8(_SizedInt):
    __slots__ = ()
    _signed = True
    width = 1


class Int16(_SizedInt):
    __slots__ = ()
    _signed = True
    width = 2


class Int32(_SizedInt):
    __slots__ = ()
    _signed = True
    width = 4


class Int64(_SizedInt):
    __slots__ = ()
    _signed = True
    width = 8


class Int128(_SizedInt):
    __slots__ = ()
    _signed = True
    width = 16
