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

from .types import Buffer


class Writer:
    """Simple in-memory sink for encoded bytes.

    This implementation defers joining everything until finalize is called, before that every write is stored as a
    memoryview in a list.
    """

    __slots__ = ('_parts', '_pos')

    def __init__(self) -> None:
        self._parts: list[memoryview] = []
        self._pos: int = 0

    @property
    def position(self) -> int:
        return self._pos

    def finalize(self) -> bytes:
        """Get the resulting byte sequence."""
        return b''.join(self._parts)

    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        # int.to_bytes checks for correct range
        self._parts.append(memoryview(int.to_bytes(data, 1, 'little')))
        self._pos += 1

    def write_bytes(self, data: Buffer) -> None:
        """Write a byte sequence."""
        self._parts.append(memoryview(data))
        self._pos += len(data)
