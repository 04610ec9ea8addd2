"""Unit tests for configuration management."""

import pytest

from src.utils.config import PRESET_SERVINGS, Config


class TestConfigInitialization:
    """Test Config class initialization and environment variable loading."""

    def test_config_loads_default_values(self, monkeypatch):
        """Test that Config uses default values when env vars not set."""
        for name in (
            "RECIPE_API_BASE_URL",
            "REQUEST_TIMEOUT_S",
            "COPY_ACK_MS",
            "MAX_IMAGE_SIZE_MB",
            "DEFAULT_SERVINGS",
            "DISCARD_STALE_RESULTS",
        ):
            monkeypatch.delenv(name, raising=False)

        config = Config()

        assert config.RECIPE_API_BASE_URL == "http://localhost:5000"
        assert config.REQUEST_TIMEOUT_S == 60
        assert config.COPY_ACK_MS == 2000
        assert config.MAX_IMAGE_SIZE_MB == 10
        assert config.DEFAULT_SERVINGS == 1
        assert config.DISCARD_STALE_RESULTS is False

    def test_config_loads_from_environment(self, monkeypatch):
        """Test that Config loads values from environment variables."""
        monkeypatch.setenv("RECIPE_API_BASE_URL", "https://recipes.example.com")
        monkeypatch.setenv("REQUEST_TIMEOUT_S", "12.5")
        monkeypatch.setenv("COPY_ACK_MS", "500")
        monkeypatch.setenv("MAX_IMAGE_SIZE_MB", "3")
        monkeypatch.setenv("DEFAULT_SERVINGS", "4")
        monkeypatch.setenv("DISCARD_STALE_RESULTS", "yes")

        config = Config()

        assert config.RECIPE_API_BASE_URL == "https://recipes.example.com"
        assert config.REQUEST_TIMEOUT_S == 12.5
        assert config.COPY_ACK_MS == 500
        assert config.MAX_IMAGE_SIZE_MB == 3
        assert config.DEFAULT_SERVINGS == 4
        assert config.DISCARD_STALE_RESULTS is True

    @pytest.mark.parametrize("raw", ["false", "0", "no", "anything"])
    def test_discard_stale_falsey_values(self, monkeypatch, raw):
        monkeypatch.setenv("DISCARD_STALE_RESULTS", raw)
        assert Config().DISCARD_STALE_RESULTS is False


class TestConfigValidation:
    """Test Config validation logic."""

    def test_defaults_are_valid(self, monkeypatch):
        monkeypatch.delenv("RECIPE_API_BASE_URL", raising=False)
        monkeypatch.delenv("DEFAULT_SERVINGS", raising=False)
        Config().validate()  # Should not raise

    def test_rejects_non_http_base_url(self, monkeypatch):
        monkeypatch.setenv("RECIPE_API_BASE_URL", "ftp://recipes.example.com")
        with pytest.raises(ValueError, match="RECIPE_API_BASE_URL"):
            Config().validate()

    def test_rejects_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT_S", "0")
        with pytest.raises(ValueError, match="REQUEST_TIMEOUT_S"):
            Config().validate()

    def test_rejects_non_positive_copy_ack(self, monkeypatch):
        monkeypatch.setenv("COPY_ACK_MS", "-1")
        with pytest.raises(ValueError, match="COPY_ACK_MS"):
            Config().validate()

    def test_rejects_zero_image_limit(self, monkeypatch):
        monkeypatch.setenv("MAX_IMAGE_SIZE_MB", "0")
        with pytest.raises(ValueError, match="MAX_IMAGE_SIZE_MB"):
            Config().validate()

    def test_default_servings_must_be_a_preset(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_SERVINGS", "5")
        with pytest.raises(ValueError, match="DEFAULT_SERVINGS"):
            Config().validate()

    @pytest.mark.parametrize("servings", PRESET_SERVINGS)
    def test_every_preset_is_a_valid_default(self, monkeypatch, servings):
        monkeypatch.setenv("DEFAULT_SERVINGS", str(servings))
        Config().validate()
