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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from canoser.conf.settings import CanoserSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'CANOSER_CONFIG_YAML'

# source name used when no yaml file is configured
DEFAULT_SOURCE = '<defaults>'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: CanoserSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_settings() -> CanoserSettings:
    """
    Returns the process-wide settings.

    Reads them from the yaml filepath in the 'CANOSER_CONFIG_YAML' env var. If it isn't set, the defaults are used.
    """
    source = os.environ.get(CONFIG_YAML_ENV_VAR, DEFAULT_SOURCE)
    return _load_settings_singleton(source)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded, or '<defaults>'.

    XXX: Will raise an assertion error if get_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_settings() not called before'
    return _settings_singleton.source


def reset_settings() -> None:
    """Forget the loaded settings, the next get_settings() call loads them again."""
    global _settings_singleton
    _settings_singleton = None


def _load_settings_singleton(source: str) -> CanoserSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    log = logger.new(source=source)
    if source == DEFAULT_SOURCE:
        settings = CanoserSettings()
    else:
        settings = CanoserSettings.from_yaml(filepath=source)
    log.info('settings loaded', **settings.model_dump())

    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings
