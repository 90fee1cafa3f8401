"""
Tests: settings and logging setup.

Run with:
    pytest digest_columns/tests/test_config.py -v
"""

import logging

from digest_columns.config import get_settings
from digest_columns.utils.logger import setup_logging


class TestSettings:
    def test_defaults(self):
        s = get_settings()
        assert s.digest_algorithm == "MD5"
        assert s.digest_encoding == "hex"
        assert s.digest_auto is True
        assert s.mock_mode is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DIGEST_AUTO", "false")
        monkeypatch.setenv("digest_encoding", "binary")
        s = get_settings()
        assert s.digest_auto is False
        assert s.digest_encoding == "binary"

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_setup_is_idempotent(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        setup_logging("debug")
        setup_logging("debug")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("pymongo").level == logging.WARNING
