import json

import pytest

from k8s_sidecar_injector.config.config import Config, SidecarSettings
from k8s_sidecar_injector.utils.exceptions import ConfigError


def test_defaults(monkeypatch):
    for key in ("JAEGER_AGENT_IMAGE", "JAEGER_VERSION", "JAEGER_AGENT_MAX_CPU", "JAEGER_AGENT_MAX_MEMORY"):
        monkeypatch.delenv(key, raising=False)
    settings = Config().sidecar_settings
    assert settings == SidecarSettings()
    assert settings.image == "jaegertracing/jaeger-agent:1.7"
    assert settings.max_cpu == "500m"
    assert settings.max_memory == "128Mi"


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("JAEGER_VERSION", "1.8")
    monkeypatch.setenv("JAEGER_AGENT_MAX_CPU", "250m")
    config = Config()
    assert config.jaeger_version == "1.8"
    assert config.sidecar_settings.max_cpu == "250m"


def test_runtime_overrides_environment(monkeypatch):
    monkeypatch.setenv("JAEGER_VERSION", "1.8")
    config = Config({"JAEGER_VERSION": "1.9"})
    assert config.sidecar_settings.agent_version == "1.9"
    assert config.JAEGER_VERSION == "1.9"


def test_boolean_environment(monkeypatch):
    monkeypatch.setenv("LOG_TO_FILE", "yes")
    assert Config().log_to_file is True


def test_settings_are_immutable():
    settings = SidecarSettings()
    with pytest.raises(Exception):
        settings.agent_version = "2.0"


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        Config().does_not_exist


def test_convert_env_value_errors():
    with pytest.raises(ConfigError):
        Config.convert_env_value("X", "abc", int)
    with pytest.raises(ConfigError):
        Config.convert_env_value("X", "abc", dict)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"JAEGER_AGENT_IMAGE": "registry.local/agent"}))
    config = Config(Config.load_config(str(path)))
    assert config.sidecar_settings.image.startswith("registry.local/agent:")


def test_load_config_missing(tmp_path):
    with pytest.raises(ConfigError):
        Config.load_config(str(tmp_path / "missing.json"))


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        Config.load_config(str(path))
