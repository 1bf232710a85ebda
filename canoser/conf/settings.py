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

from pathlib import Path
from typing import Union

from pydantic import field_validator

from canoser.utils import pydantic
from canoser.utils.yaml import dict_from_yaml


class CanoserSettings(pydantic.BaseModel):
    # Maximum length accepted when decoding a length-prefixed byte string or utf-8 string
    MAX_BYTES_LENGTH: int = 2**31 - 1

    # Maximum number of elements accepted when decoding a sequence. Elements can take no bytes at all (an empty
    # struct), so this bounds how many objects a short input can make the decoder build.
    MAX_SEQUENCE_LENGTH: int = 2**16

    # Maximum number of bytes of a LEB128 length prefix, 5 bytes hold any 32-bit length
    MAX_LEB128_BYTES: int = 5

    @field_validator('MAX_BYTES_LENGTH', 'MAX_SEQUENCE_LENGTH', 'MAX_LEB128_BYTES')
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('must be a positive integer')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CanoserSettings':
        """Takes a filepath to a yaml file and returns a validated CanoserSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
