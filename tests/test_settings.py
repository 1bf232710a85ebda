import pytest
from pydantic import ValidationError

from canoser.conf import CanoserSettings, get_settings, get_settings_source, reset_settings


def test_defaults() -> None:
    settings = get_settings()
    assert settings == CanoserSettings()
    assert settings.MAX_LEB128_BYTES == 5
    assert get_settings_source() == '<defaults>'
    assert get_settings() is settings


def test_from_yaml(tmp_path, monkeypatch) -> None:
    config = tmp_path / 'canoser.yml'
    config.write_text('MAX_BYTES_LENGTH: 1024\nMAX_SEQUENCE_LENGTH: 16\n')
    monkeypatch.setenv('CANOSER_CONFIG_YAML', str(config))
    settings = get_settings()
    assert settings.MAX_BYTES_LENGTH == 1024
    assert settings.MAX_SEQUENCE_LENGTH == 16
    assert settings.MAX_LEB128_BYTES == 5
    assert get_settings_source() == str(config)


def test_empty_yaml(tmp_path) -> None:
    config = tmp_path / 'empty.yml'
    config.write_text('')
    assert CanoserSettings.from_yaml(filepath=config) == CanoserSettings()


def test_loading_twice_from_different_sources(tmp_path, monkeypatch) -> None:
    get_settings()
    config = tmp_path / 'canoser.yml'
    config.write_text('MAX_BYTES_LENGTH: 1024\n')
    monkeypatch.setenv('CANOSER_CONFIG_YAML', str(config))
    with pytest.raises(Exception, match='loading config twice'):
        get_settings()
    reset_settings()
    assert get_settings().MAX_BYTES_LENGTH == 1024


def test_invalid_values(tmp_path) -> None:
    with pytest.raises(ValidationError):
        CanoserSettings(MAX_BYTES_LENGTH=0)
    with pytest.raises(ValidationError):
        CanoserSettings(UNKNOWN_SETTING=1)

    config = tmp_path / 'list.yml'
    config.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        CanoserSettings.from_yaml(filepath=config)
    with pytest.raises(ValueError):
        CanoserSettings.from_yaml(filepath=tmp_path / 'missing.yml')


def test_settings_are_frozen() -> None:
    settings = CanoserSettings()
    with pytest.raises(ValidationError):
        settings.MAX_BYTES_LENGTH = 1  # type: ignore[misc]
