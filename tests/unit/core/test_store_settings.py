"""
Unit tests for the process-wide store settings.
"""

import pytest

from core.config import StoreSettings, get_store_settings


class TestStoreSettings:
    def test_built_once(self):
        assert get_store_settings() is get_store_settings()

    def test_reads_django_settings(self):
        config = get_store_settings()

        assert config.base_url == "http://testserver"
        assert config.payos_checksum_key == "test-checksum-key"
        assert config.admin_api_secret == "test-admin-secret"
        assert config.activation_require_device_id is False

    def test_rebuilt_when_store_setting_changes(self, settings):
        before = get_store_settings()

        settings.ADMIN_API_SECRET = "rotated-secret"

        after = get_store_settings()
        assert after is not before
        assert after.admin_api_secret == "rotated-secret"

    def test_unrelated_setting_keeps_instance(self, settings):
        before = get_store_settings()

        settings.RATE_LIMIT_PER_MINUTE = 5

        assert get_store_settings() is before

    def test_immutable(self):
        with pytest.raises(AttributeError):
            get_store_settings().admin_api_secret = "x"

    def test_base_url_trailing_slash_dropped(self, settings):
        settings.STORE_BASE_URL = "https://store.example.com/"

        assert get_store_settings().base_url == "https://store.example.com"
        assert isinstance(get_store_settings(), StoreSettings)
