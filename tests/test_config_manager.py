"""
Tests for CORS configuration loading
"""

import pytest
import yaml

from cors_wrapper.core.config_manager import ConfigManager, get_config_manager
from cors_wrapper.core.policy import CorsPolicy
from cors_wrapper.exceptions import ConfigurationError


def write_config(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestConfigFile:

    def test_missing_file_gives_empty_policy(self, tmp_path):
        manager = ConfigManager(tmp_path / "missing.yaml")

        assert manager.get_options() == []
        assert manager.build_policy() == CorsPolicy()

    def test_lists_and_max_age(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {
            "cors": {
                "origins": ["https://a.com", "https://b.com"],
                "methods": ["GET", "POST"],
                "headers": ["Content-Type"],
                "max_age": 600,
            }
        })

        policy = ConfigManager(config_file).build_policy()

        assert policy == CorsPolicy(
            allowed_origins="https://a.com, https://b.com",
            allowed_methods="GET, POST",
            allowed_headers="Content-Type",
            max_age=600,
        )

    def test_comma_separated_strings(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {
            "cors": {"origins": "https://a.com, https://b.com", "methods": "GET,POST"}
        })

        policy = ConfigManager(config_file).build_policy()

        assert policy.allowed_origins == "https://a.com, https://b.com"
        assert policy.allowed_methods == "GET, POST"

    def test_fractional_max_age_is_truncated(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {"cors": {"max_age": 0.5}})

        assert ConfigManager(config_file).build_policy().max_age == 0

    def test_only_configured_fields_produce_options(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {"cors": {"methods": ["GET"]}})

        assert len(ConfigManager(config_file).get_options()) == 1

    def test_file_without_cors_section(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {"other": {"key": "value"}})

        assert ConfigManager(config_file).build_policy().is_empty

    def test_malformed_yaml_is_ignored(self, tmp_path):
        config_file = tmp_path / "cors.yaml"
        config_file.write_text("cors: [unclosed", encoding="utf-8")

        assert ConfigManager(config_file).build_policy().is_empty

    def test_non_mapping_section_raises(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {"cors": ["https://a.com"]})

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            ConfigManager(config_file)

    def test_invalid_max_age_raises(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {"cors": {"max_age": "ten minutes"}})

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_file)

        assert exc_info.value.source == str(config_file)

    def test_unknown_keys_are_ignored(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {
            "cors": {"origins": ["*"], "allow_credentials": True}
        })

        assert ConfigManager(config_file).build_policy().allowed_origins == "*"


class TestOverrides:

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_file = write_config(tmp_path / "cors.yaml", {
            "cors": {"origins": ["https://file.com"], "methods": ["GET"]}
        })
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://env.com,https://env2.com")
        monkeypatch.setenv("CORS_MAX_AGE", "30")

        policy = ConfigManager(config_file).build_policy()

        assert policy.allowed_origins == "https://env.com, https://env2.com"
        assert policy.allowed_methods == "GET"
        assert policy.max_age == 30

    def test_empty_environment_value_is_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CORS_MAX_AGE", "")

        assert ConfigManager(tmp_path / "missing.yaml").build_policy().max_age is None

    def test_explicit_overrides_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CORS_ALLOWED_HEADERS", "X-Env")

        manager = ConfigManager(tmp_path / "missing.yaml", overrides={"headers": ["X-Override"]})

        assert manager.build_policy().allowed_headers == "X-Override"

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        config_file = write_config(tmp_path / "custom.yaml", {"cors": {"origins": ["*"]}})
        monkeypatch.setenv("CORS_CONFIG_FILE", str(config_file))

        manager = ConfigManager()

        assert manager.config_file == config_file
        assert manager.build_policy().allowed_origins == "*"

    def test_reload_picks_up_changes(self, tmp_path):
        config_file = write_config(tmp_path / "cors.yaml", {"cors": {"origins": ["https://a.com"]}})
        manager = ConfigManager(config_file)

        write_config(config_file, {"cors": {"origins": ["https://b.com"]}})
        manager.reload_config()

        assert manager.settings.origins == ["https://b.com"]


def test_get_config_manager_is_shared(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("cors_wrapper.core.config_manager._config_manager", None)

    assert get_config_manager() is get_config_manager()


@pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
def test_non_finite_max_age_from_environment_raises(tmp_path, monkeypatch, value):
    monkeypatch.setenv("CORS_MAX_AGE", value)

    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path / "missing.yaml")


@pytest.mark.parametrize("text", ["max_age: .inf", "max_age: 1e400", "max_age: .nan"])
def test_non_finite_max_age_from_file_raises(tmp_path, text):
    config_file = tmp_path / "cors.yaml"
    config_file.write_text(f"cors:\n  {text}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigManager(config_file)
