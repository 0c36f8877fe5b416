"""
Tests for the Configuration Manager.

This module covers configuration loading, merging, environment variable
substitution and the LocationIQ / logging accessors.
"""

import os
import tempfile
from pathlib import Path

import pytest

from internal.config.manager import ConfigManager, substituteEnvVars

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tempDir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sampleConfigToml():
    """Provide sample valid TOML configuration."""
    return """
[locationiq]
token = "test_token_123"
request-timeout = 5

[logging]
level = "INFO"
"""


@pytest.fixture
def defaultsToml():
    """Provide default configuration TOML."""
    return """
[locationiq]
base-url = "https://us1.locationiq.com"
request-timeout = 10

[logging]
level = "WARNING"
console = true
"""


# ============================================================================
# Helper Functions
# ============================================================================


def createConfigFile(directory: Path, filename: str, content: str) -> Path:
    """Create a TOML config file in the specified directory."""
    filePath = directory / filename
    filePath.write_text(content)
    return filePath


def createConfigDir(baseDir: Path, dirName: str, files: dict) -> Path:
    """Create a config directory with multiple TOML files."""
    configDir = baseDir / dirName
    configDir.mkdir(parents=True, exist_ok=True)

    for filename, content in files.items():
        createConfigFile(configDir, filename, content)

    return configDir


def makeManager(tempDir: Path, configPath: Path | str, **kwargs) -> ConfigManager:
    """Create ConfigManager which doesn't pick up .env from working directory."""
    return ConfigManager(str(configPath), dotEnvFile=str(tempDir / "missing.env"), **kwargs)


# ============================================================================
# Loading Tests
# ============================================================================


class TestConfigurationLoading:
    """Test configuration loading from TOML files."""

    def testLoadSingleConfigFile(self, tempDir, sampleConfigToml):
        """Test loading configuration from single TOML file."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)

        manager = makeManager(tempDir, configPath)

        assert manager.configPath == str(configPath)
        assert manager.getLocationIQConfig()["token"] == "test_token_123"
        assert manager.getLoggingConfig() == {"level": "INFO"}

    def testMissingConfigWithoutDirsExits(self, tempDir):
        """Test initialization fails when config file doesn't exist and no dirs provided."""
        with pytest.raises(SystemExit):
            makeManager(tempDir, tempDir / "nonexistent.toml")

    def testInvalidSyntaxExits(self, tempDir):
        """Test broken main config file stops loading."""
        configPath = createConfigFile(tempDir, "config.toml", "[locationiq\ntoken = 'x'\n")

        with pytest.raises(SystemExit):
            makeManager(tempDir, configPath)

    def testConfigDirsWithoutMainFile(self, tempDir, defaultsToml):
        """Test main config file is optional when config dirs are given."""
        configDir = createConfigDir(tempDir, "defaults", {"defaults.toml": defaultsToml})

        manager = makeManager(tempDir, tempDir / "nonexistent.toml", configDirs=[str(configDir)])

        assert manager.getLocationIQConfig()["request-timeout"] == 10
        assert "token" not in manager.getLocationIQConfig()

    def testMissingSectionsAreEmpty(self, tempDir):
        """Test accessors return empty dicts for missing sections."""
        configPath = createConfigFile(tempDir, "config.toml", "")

        manager = makeManager(tempDir, configPath)

        assert manager.getLocationIQConfig() == {}
        assert manager.getLoggingConfig() == {}
        assert manager.get("missing", "default") == "default"


# ============================================================================
# Merging Tests
# ============================================================================


class TestConfigurationMerging:
    """Test configuration merging logic."""

    def testConfigDirsOverrideMainFile(self, tempDir, sampleConfigToml, defaultsToml):
        """Test config dirs are merged on top of the main config."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(tempDir, "defaults", {"defaults.toml": defaultsToml})

        manager = makeManager(tempDir, configPath, configDirs=[str(configDir)])

        locationIQConfig = manager.getLocationIQConfig()
        assert locationIQConfig["token"] == "test_token_123"
        assert locationIQConfig["request-timeout"] == 10
        assert locationIQConfig["base-url"] == "https://us1.locationiq.com"
        assert manager.getLoggingConfig() == {"level": "WARNING", "console": True}

    def testMergePriority(self, tempDir):
        """Test that later files override earlier ones."""
        configPath = createConfigFile(tempDir, "config.toml", '[locationiq]\ntoken = "first"\n')
        configDir = createConfigDir(
            tempDir,
            "configs",
            {
                "02-third.toml": '[locationiq]\ntoken = "third"\n',
                "01-second.toml": '[locationiq]\ntoken = "second"\nrequest-timeout = 2\n',
            },
        )

        manager = makeManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.getLocationIQConfig() == {"token": "third", "request-timeout": 2}

    def testBrokenFileInConfigDirIsSkipped(self, tempDir, sampleConfigToml):
        """Test broken files in config dirs don't stop loading."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(
            tempDir,
            "configs",
            {
                "01-broken.toml": "[locationiq\n",
                "02-good.toml": '[locationiq]\nbase-url = "https://eu1.locationiq.com"\n',
            },
        )

        manager = makeManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.getLocationIQConfig()["base-url"] == "https://eu1.locationiq.com"
        assert manager.getLocationIQConfig()["token"] == "test_token_123"

    def testNonExistentConfigDirIsSkipped(self, tempDir, sampleConfigToml):
        """Test missing config directory is skipped."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)

        manager = makeManager(tempDir, configPath, configDirs=[str(tempDir / "nope")])

        assert manager.getLocationIQConfig()["token"] == "test_token_123"

    def testNestedConfigsFoundRecursively(self, tempDir, sampleConfigToml):
        """Test .toml files in nested directories are merged."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(tempDir, "configs", {})
        createConfigDir(configDir, "nested", {"logging.toml": '[logging.logger."lib.locationiq"]\nlevel = "DEBUG"\n'})

        manager = makeManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.getLoggingConfig()["logger"]["lib.locationiq"]["level"] == "DEBUG"
        assert manager.getLoggingConfig()["level"] == "INFO"


# ============================================================================
# Environment Variables Tests
# ============================================================================


class TestEnvironmentVariables:
    """Test ${VAR} substitution and .env loading."""

    def testSubstituteEnvVars(self, monkeypatch):
        """Test placeholders are replaced recursively."""
        monkeypatch.setenv("LOCATIONIQ_TOKEN", "secret")
        monkeypatch.delenv("MISSING_VAR", raising=False)

        result = substituteEnvVars(
            {"a": "${LOCATIONIQ_TOKEN}", "b": ["x-${LOCATIONIQ_TOKEN}", 1], "c": "${MISSING_VAR}"}
        )

        assert result == {"a": "secret", "b": ["x-secret", 1], "c": "${MISSING_VAR}"}

    def testTokenFromEnvironment(self, tempDir, monkeypatch):
        """Test token placeholder is filled from environment."""
        monkeypatch.setenv("LOCATIONIQ_TOKEN", "env_token")
        configPath = createConfigFile(tempDir, "config.toml", '[locationiq]\ntoken = "${LOCATIONIQ_TOKEN}"\n')

        manager = makeManager(tempDir, configPath)

        assert manager.getLocationIQConfig()["token"] == "env_token"

    def testTokenFromDotEnvFile(self, tempDir, monkeypatch):
        """Test token placeholder is filled from .env file."""
        monkeypatch.delenv("LIQ_TEST_DOTENV_TOKEN", raising=False)
        dotEnvPath = tempDir / ".env"
        dotEnvPath.write_text('LIQ_TEST_DOTENV_TOKEN="dotenv_token"\n')
        configPath = createConfigFile(tempDir, "config.toml", '[locationiq]\ntoken = "${LIQ_TEST_DOTENV_TOKEN}"\n')

        try:
            manager = ConfigManager(str(configPath), dotEnvFile=str(dotEnvPath))
            assert manager.getLocationIQConfig()["token"] == "dotenv_token"
        finally:
            os.environ.pop("LIQ_TEST_DOTENV_TOKEN", None)
