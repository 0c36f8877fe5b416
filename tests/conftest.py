"""
Pytest configuration and common fixtures for LocationIQ client tests.

All fixtures follow camelCase naming convention.
"""

import logging
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import MagicMock, patch

import pytest

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def writeConfig(tmp_path: Path) -> Callable[[str], Path]:
    """
    Provide factory writing config.toml into a temporary directory.

    Returns:
        Callable: function taking TOML content and returning the config path
    """

    def _writeConfig(content: str, filename: str = "config.toml") -> Path:
        configPath = tmp_path / filename
        configPath.write_text(content)
        return configPath

    return _writeConfig


# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def mockHttpClient() -> Generator[MagicMock, None, None]:
    """
    Patch httpx.AsyncClient, the default response is a successful reverse result.

    Yields:
        MagicMock: patched AsyncClient class
    """
    with patch("httpx.AsyncClient") as mockClient:
        mockResponse = MagicMock()
        mockResponse.status_code = 200
        mockResponse.json.return_value = {"place_id": "1", "display_name": "Paris, France"}
        mockClient.return_value.__aenter__.return_value.get.return_value = mockResponse
        yield mockClient


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restoreRootLogger() -> Generator[logging.Logger, None, None]:
    """
    Restore root logger level and handlers after test changes them.

    Yields:
        logging.Logger: root logger
    """
    rootLogger = logging.getLogger()
    level = rootLogger.level
    handlers = rootLogger.handlers[:]
    yield rootLogger
    for handler in rootLogger.handlers[:]:
        if handler not in handlers:
            handler.close()
        rootLogger.removeHandler(handler)
    for handler in handlers:
        rootLogger.addHandler(handler)
    rootLogger.setLevel(level)
