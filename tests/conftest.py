import pytest
from loguru import logger

from stringkit.core.config import get_config


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Give every test a clean environment and a fresh cached configuration."""
    for name in ('APP_NAME', 'LOG_LEVEL', 'LOG_TO_FILE', 'LOG_FILE_PATH'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('ENVIRONMENT', 'test')
    get_config.cache_clear()

    yield

    get_config.cache_clear()
    logger.remove()
    logger.disable('stringkit')
