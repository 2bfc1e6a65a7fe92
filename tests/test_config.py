#=============================================================================
# File        : tests/test_config.py
# Project     : DropGuard v1.0
# Component   : Configuration and Status Test Suite
# Description : Validation, environment overrides and diagnostics
#               • DropGuardConfig validation and immutability
#               • DROPGUARD_* environment overrides
#               • configure() and get_status() wiring
# Author      : Kyle Clouthier
# Version     : 1.0.0
# Created     : 2025-08-27
#=============================================================================

import sys
import logging
import dataclasses
import pytest
from pathlib import Path

# Add dropguard to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent))

import dropguard
from dropguard import DropGuardConfig, get_default_config, set_default_config


@pytest.fixture(autouse=True)
def restore_default_config():
    """Keep process defaults and logger level isolated between tests."""
    logger = logging.getLogger("dropguard")
    level = logger.level
    yield
    set_default_config(None)
    logger.setLevel(level)


class TestDropGuardConfig:
    """Dataclass validation."""

    def test_defaults(self):
        config = DropGuardConfig()
        assert config.log_level == "WARNING"
        assert config.abort_on_release_failure is True
        assert config.track_handles is True
        assert config.redact_paths is True
        assert config.warn_on_implicit_release is False

    def test_log_level_normalized(self):
        assert DropGuardConfig(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            DropGuardConfig(log_level="LOUD")

    def test_frozen(self):
        config = DropGuardConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.track_handles = False

    def test_merge_returns_copy(self):
        base = DropGuardConfig()
        merged = base.merge(redact_paths=False)
        assert merged.redact_paths is False
        assert base.redact_paths is True


class TestEnvironmentOverrides:
    """DROPGUARD_* variables overlay a base config."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DROPGUARD_LOG_LEVEL", "info")
        monkeypatch.setenv("DROPGUARD_ABORT_ON_RELEASE_FAILURE", "0")
        monkeypatch.setenv("DROPGUARD_TRACK_HANDLES", "no")
        monkeypatch.setenv("DROPGUARD_REDACT_PATHS", "false")
        monkeypatch.setenv("DROPGUARD_WARN_IMPLICIT_RELEASE", "yes")

        config = DropGuardConfig.from_env()
        assert config.log_level == "INFO"
        assert config.abort_on_release_failure is False
        assert config.track_handles is False
        assert config.redact_paths is False
        assert config.warn_on_implicit_release is True

    def test_unset_env_keeps_base(self, monkeypatch):
        for name in ("DROPGUARD_LOG_LEVEL", "DROPGUARD_TRACK_HANDLES"):
            monkeypatch.delenv(name, raising=False)
        base = DropGuardConfig(log_level="ERROR", track_handles=False)
        config = DropGuardConfig.from_env(base)
        assert config.log_level == "ERROR"
        assert config.track_handles is False

    def test_default_config_reads_env_lazily(self, monkeypatch):
        monkeypatch.setenv("DROPGUARD_REDACT_PATHS", "0")
        set_default_config(None)
        assert get_default_config().redact_paths is False


class TestConfigure:
    """configure() and get_status()."""

    def test_configure_sets_default_and_level(self):
        config = dropguard.configure(log_level="DEBUG", warn_on_implicit_release=True)
        assert get_default_config() is config
        assert config.warn_on_implicit_release is True
        assert logging.getLogger("dropguard").level == logging.DEBUG

    def test_new_handles_use_default(self, tmp_path):
        dropguard.configure(DropGuardConfig(redact_paths=False))
        path = tmp_path / "a" / "b" / "c.bin"
        path.parent.mkdir(parents=True)
        with dropguard.guarded_open(path, create=True) as f:
            assert str(path) in repr(f)

    def test_status(self, tmp_path):
        dropguard.configure(DropGuardConfig())
        with dropguard.guarded_open(tmp_path / "s.bin", create=True):
            status = dropguard.get_status()

        assert status['configuration']['log_level'] == "WARNING"
        assert status['guarded_files']['pending_deletions'] >= 1
        assert status['performance_stats']['total_opens'] >= 1
        open_files = status['process_open_files']
        assert open_files is None or open_files >= 1
