"""Unit tests for the configuration context."""

from storefront.runtime.config.config_data import ConfigData
from storefront.runtime.context import (
    AppContext,
    get_config,
    get_context,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.app.host == original_host
        assert after_config is original_config

    def test_unset_fields_are_inherited(self):
        original = get_config()

        test_config = ConfigData()
        test_config.seed.enabled = False

        with with_context(test_config):
            config = get_config()
            assert config.seed.enabled is False
            assert config.seed.source_url == original.seed.source_url
            assert config.database.url == original.database.url

    def test_nested_overrides(self):
        outer = ConfigData()
        outer.app.port = 9001
        inner = ConfigData()
        inner.database.url = "sqlite:///./inner.db"

        with with_context(outer):
            with with_context(inner):
                config = get_config()
                assert config.app.port == 9001
                assert config.database.url == "sqlite:///./inner.db"
            assert get_config().database.url != "sqlite:///./inner.db"

    def test_none_override_keeps_context(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original
