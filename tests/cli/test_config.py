"""Tests for Config."""

import pytest

from src.cli.config import Config
from src.scanner import ScannerConfig
from src.unity_project import EnumeratorConfig

VARIABLES = [
    "UNITY_PROJECT_DIR",
    "ASSET_ROOT",
    "ASSETS_CONTEXT",
    "BUILD_SETTINGS_PATH",
    "SKIP_HIDDEN_OBJECTS",
    "MISSING_MARKER",
    "MCP_SERVER_NAME",
    "KNOWN_SCRIPT_GUIDS",
]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so values loaded from .env files are removed again on teardown
    for name in VARIABLES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestConfig:
    """Test cases for Config."""

    def test_defaults(self, clean_env, tmp_path):
        """Test defaults apply when the env file sets nothing."""
        env_file = tmp_path / ".env"
        env_file.write_text("", encoding="utf-8")

        config = Config(str(env_file))

        assert config.project_dir == "."
        assert config.asset_root == "Assets/"
        assert config.assets_context == "Project"
        assert config.skip_hidden_objects is True
        assert config.missing_marker == "Missing"
        assert config.known_script_guids == ["f70555f144d8491a825f0804e09c671c"]

    def test_env_file_values(self, clean_env, tmp_path):
        """Test values are read from the given env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            f"UNITY_PROJECT_DIR={tmp_path}\nASSET_ROOT=Assets/Game/\nSKIP_HIDDEN_OBJECTS=false\nMISSING_MARKER=Gone\n",
            encoding="utf-8",
        )

        config = Config(str(env_file))

        assert config.project_dir == str(tmp_path)
        assert config.project_exists()
        assert EnumeratorConfig.from_config(config).asset_root == "Assets/Game/"
        assert EnumeratorConfig.from_config(config).skip_hidden_objects is False
        assert ScannerConfig.from_config(config).missing_marker == "Gone"

    def test_missing_project(self, clean_env, tmp_path):
        """Test a project directory that does not exist is detected."""
        clean_env.setenv("UNITY_PROJECT_DIR", str(tmp_path / "nowhere"))
        env_file = tmp_path / ".env"
        env_file.write_text("", encoding="utf-8")

        assert not Config(str(env_file)).project_exists()

    def test_known_script_guids_list(self, clean_env, tmp_path):
        """Test known script GUIDs are read as a comma-separated list."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "KNOWN_SCRIPT_GUIDS=f70555f144d8491a825f0804e09c671c, 0123456789abcdef0123456789abcdef,\n",
            encoding="utf-8",
        )

        config = Config(str(env_file))

        assert config.known_script_guids == ["f70555f144d8491a825f0804e09c671c", "0123456789abcdef0123456789abcdef"]
