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
Field kinds, each one knows how to encode the value it holds and how to decode a new instance from a cursor.

Primitive kinds have a fixed width. Compound kinds (Optional, Sequence, Struct) delegate to the kinds they are made of.
"""

from canoser.fields.bool import Bool
from canoser.fields.bytes import Bytes, Str
from canoser.fields.field import Field
from canoser.fields.optional import Optional
from canoser.fields.sequence import Sequence
from canoser.fields.sized_int import Int8, Int16, Int32, Int64, Int128, Uint8, Uint16, Uint32, Uint64, Uint128
from canoser.fields.struct import Struct

__all__ = [
    'Field',
    'Bool',
    'Bytes',
    'Str',
    'Optional',
    'Sequence',
    'Struct',
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'Int128',
    'Uint8',
    'Uint16',
    'Uint32',
    'Uint64',
    'Uint128',
]
