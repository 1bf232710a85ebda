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


class CanoserError(Exception):
    """Base class for exceptions in canoser."""
    pass


class SerializationError(CanoserError):
    """Raised when a byte sequence cannot be decoded."""
    pass


class UnderflowError(SerializationError):
    """Raised when the cursor does not have enough bytes left to satisfy a read.
    """
    pass


class MalformedValueError(SerializationError):
    """Raised when the bytes were read but they don't represent a legal value for the field.
    """
    pass


class TrailingDataError(SerializationError):
    """Raised when a buffer was expected to be fully consumed but there are bytes left."""
    pass


class TooLongError(SerializationError):
    """Raised when a declared length goes over the configured limit."""
    pass


class FieldTypeError(CanoserError, TypeError):
    """Raised when a field is built from a value of the wrong Python type."""
    pass


class FieldValueError(CanoserError, ValueError):
    """Raised when a field is built from a value outside of the range its kind accepts."""
    pass
