import pytest

from canoser.conf import reset_settings
from canoser.conf.get_settings import CONFIG_YAML_ENV_VAR


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    reset_settings()
    yield
    reset_settings()
