import pytest

from evmchains.config import get_settings
from evmchains.registry import ChainRegistry


@pytest.fixture()
def registry() -> ChainRegistry:
    return ChainRegistry()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
