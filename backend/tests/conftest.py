import pytest
import structlog

from properium.config import get_settings
from properium.schema.spec import PropertySpec
from properium.validators.engine import ValidationEngine


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # Settings come from the environment; keep each test on the defaults
    for name in ("PROPERIUM_UNKNOWN_PROPS", "PROPERIUM_DEBUG", "PROPERIUM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture()
def engine():
    return ValidationEngine()


@pytest.fixture()
def make_spec():
    def _make(**rules):
        rules.setdefault("name", "id")
        return PropertySpec(**rules)

    return _make
