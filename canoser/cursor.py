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
A cursor is a sequential reader over a byte buffer that is never modified.

>>> cursor = Cursor(b'\x05\x00\x01')
>>> cursor.read_byte()
5
>>> bytes(cursor.read_bytes(2))
b'\x00\x01'
>>> cursor.is_empty()
True
>>> cursor.finalize()

A read that cannot be satisfied fails without consuming anything:

>>> cursor = Cursor(b'\x01\x02')
>>> try:
...     cursor.read_bytes(4)
... except UnderflowError as e:
...     print(*e.args)
need 4 bytes at offset 0, only 2 left
>>> cursor.position
0
"""

from .exceptions import SerializationError, TrailingDataError, UnderflowError
from .types import Buffer

_EMPTY_VIEW = memoryview(b'')


class Cursor:
    """Read-only view over a byte buffer with a read position.

    Reads only move the position forward, by the exact amount of a successful read. Compound decoders use `rewind`
    to go back to where they started when a later read fails.
    """

    __slots__ = ('_view', '_pos')

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).toreadonly()
        self._pos = 0

    @property
    def position(self) -> int:
        """How many bytes have been consumed so far."""
        return self._pos

    def remaining(self) -> int:
        return len(self._view) - self._pos

    def is_empty(self) -> bool:
        return self._pos >= len(self._view)

    def _check_available(self, n: int) -> None:
        if n < 0:
            raise SerializationError('value cannot be negative')
        if self.remaining() < n:
            raise UnderflowError(f'need {n} bytes at offset {self._pos}, only {self.remaining()} left')

    def peek_byte(self) -> int:
        """Read a single byte but don't consume from buffer."""
        self._check_available(1)
        return self._view[self._pos]

    def peek_bytes(self, n: int) -> memoryview:
        """Read n bytes but don't consume from buffer."""
        self._check_available(n)
        return self._view[self._pos:self._pos + n]

    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        b = self.peek_byte()
        self._pos += 1
        return b

    def read_bytes(self, n: int) -> memoryview:
        """Read n bytes, errors if there isn't enough data."""
        b = self.peek_bytes(n)
        self._pos += n
        return b

    def read_all(self) -> memoryview:
        """Read all bytes until the cursor is empty."""
        if self.is_empty():
            return _EMPTY_VIEW
        b = self._view[self._pos:]
        self._pos = len(self._view)
        return b

    def rewind(self, position: int) -> None:
        """Move back to a position previously returned by `position`."""
        if not 0 <= position <= self._pos:
            raise SerializationError(f'cannot rewind to {position}, current position is {self._pos}')
        self._pos = position

    def finalize(self) -> None:
        """Make sure every byte of the buffer was consumed."""
        if not self.is_empty():
            raise TrailingDataError(f'trailing data: {self.remaining()} bytes left')
