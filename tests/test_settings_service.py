# Overview: Pytest coverage for key/value settings.

import pytest

from kidspos.services.settings_service import DEFAULT_SETTINGS
from kidspos.validation import ConflictError, NotFoundError, ValidationError


class TestSettings:
    def test_create_and_get(self, services):
        services.settings.create_setting(key="theme", value="dark", description="UI theme")
        setting = services.settings.get_setting("theme")
        assert setting.value == "dark"
        assert setting.type == "string"
        assert setting.description == "UI theme"

    def test_unknown_type_is_recorded_as_string(self, services):
        setting = services.settings.create_setting(key="mode", value="x", type="datetime")
        assert setting.type == "string"

    def test_type_does_not_coerce_value(self, services):
        setting = services.settings.create_setting(key="limit", value="lots", type="number")
        assert setting.type == "number"
        assert setting.value == "lots"

    def test_key_and_value_required(self, services):
        with pytest.raises(ValidationError):
            services.settings.create_setting(key="", value="x")
        with pytest.raises(ValidationError):
            services.settings.create_setting(key="k", value="")

    def test_duplicate_key(self, services):
        services.settings.create_setting(key="theme", value="dark")
        with pytest.raises(ConflictError):
            services.settings.create_setting(key="theme", value="light")

    def test_update_and_delete(self, services):
        services.settings.create_setting(key="theme", value="dark")
        assert services.settings.update_setting("theme", "light").value == "light"

        services.settings.delete_setting("theme")
        with pytest.raises(NotFoundError):
            services.settings.get_setting("theme")

    def test_update_unknown_key(self, services):
        with pytest.raises(NotFoundError):
            services.settings.update_setting("missing", "1")

    def test_ensure_defaults_is_idempotent(self, services):
        services.settings.create_setting(key="currency", value="USD")

        created = services.settings.ensure_defaults()

        assert created == len(DEFAULT_SETTINGS) - 1
        assert services.settings.get_setting("currency").value == "USD"
        assert services.settings.ensure_defaults() == 0
        assert [s.key for s in services.settings.list_settings()] == sorted(k for k, *_ in DEFAULT_SETTINGS)
