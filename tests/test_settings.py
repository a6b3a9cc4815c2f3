# tests/test_settings.py
"""
Settings Tests - Unit Tests for Configuration Loading and Validation

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- revagg.config.settings (Settings)
- revagg.shared.validators (validation helpers)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError

from revagg.config.settings import Settings
from revagg.shared.validators import validate_feed_url, validate_separator, validate_source_name


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("FEED_URLS", "FEED_DIR", "PAGE_SIZE", "NAV_WINDOW_SIZE"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.feed_urls == []
        assert s.page_size == 10
        assert s.nav_window_size == 4
        assert s.allow_partial_aggregation is False
        assert s.invalid_record_policy == "skip_record"

    def test_feed_urls_from_env(self, monkeypatch):
        monkeypatch.setenv(
            "FEED_URLS", "https://example.com/api/branch1.json, https://example.com/api/branch2.json"
        )
        s = Settings(_env_file=None)
        assert s.feed_urls == [
            "https://example.com/api/branch1.json",
            "https://example.com/api/branch2.json",
        ]

    def test_invalid_feed_url(self, monkeypatch):
        monkeypatch.setenv("FEED_URLS", "not-a-url")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_policy(self, monkeypatch):
        monkeypatch.setenv("INVALID_RECORD_POLICY", "ignore")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_page_size_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("PAGE_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"


class TestValidators:
    def test_validate_feed_url(self):
        assert validate_feed_url("https://example.com/api/branch1.json")
        assert validate_feed_url("http://localhost:8000/b.json")
        assert not validate_feed_url("")
        assert not validate_feed_url("file:///tmp/b.json")
        assert not validate_feed_url("example.com/b.json")

    def test_validate_source_name(self):
        assert validate_source_name("branch1")
        assert validate_source_name("north-east_2.v1")
        assert not validate_source_name("")
        assert not validate_source_name("two words")

    def test_validate_separator(self):
        assert validate_separator(",")
        assert validate_separator(" ")
        assert not validate_separator("")
        assert not validate_separator("1")
        assert not validate_separator(",,")
