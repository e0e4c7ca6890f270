import json
import os
from typing import Dict, Any, List, Optional, Union, Type, get_origin, get_args
from pydantic import BaseModel, ConfigDict, Field
from k8s_sidecar_injector.config.default import DefaultConfig
from k8s_sidecar_injector.utils.exceptions import ConfigError
from dotenv import load_dotenv
# Load environment variables
load_dotenv()


class SidecarSettings(BaseModel):
    """
    Immutable snapshot of the process-level values the injector needs.

    Built once from a Config and handed to every injection entry point, so
    the engine never reads configuration on its own.
    """

    model_config = ConfigDict(frozen=True)

    agent_image: str = Field(default=DefaultConfig.JAEGER_AGENT_IMAGE, description="Agent image repository")
    agent_version: str = Field(default=DefaultConfig.JAEGER_VERSION, description="Agent image tag")
    max_cpu: str = Field(default=DefaultConfig.JAEGER_AGENT_MAX_CPU, description="CPU limit for the sidecar")
    max_memory: str = Field(default=DefaultConfig.JAEGER_AGENT_MAX_MEMORY, description="Memory limit for the sidecar")

    @property
    def image(self) -> str:
        return f"{self.agent_image}:{self.agent_version}"


class Config:
    """
    Configuration class for the Jaeger sidecar injector.

    Precedence order for config values:
    1. Defaults from DefaultConfig
    2. Environment variables (including .env)
    3. Runtime/programmatic overrides (via config dict)

    All config keys are available as attributes and in the internal _config dict.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the configuration.
        Args:
            config: Optional configuration dictionary to override defaults (highest precedence)
        """
        default_config = {key: getattr(DefaultConfig, key) for key in dir(DefaultConfig) if not key.startswith('_')}

        self._config = default_config.copy()
        self._set_attributes(self._config)

        # Runtime overrides win over the environment
        for key, value in (config or {}).items():
            setattr(self, key.lower(), value)
            self._config[key] = value

    def _set_attributes(self, config: Dict[str, Any]) -> None:
        """
        Set attributes from configuration and environment variables.
        Environment variables take precedence over defaults.
        Updates both attributes and the internal _config dict.
        Args:
            config: Configuration dictionary
        """
        for key, value in config.items():
            env_value = os.getenv(key)
            if env_value is not None:
                value = self.convert_env_value(key, env_value, DefaultConfig.__annotations__.get(key, str))
            setattr(self, key.lower(), value)
            self._config[key] = value

    def __getattr__(self, item: str) -> Any:
        """
        Allow attribute-style access to config keys.
        Raises AttributeError if the key is missing.
        """
        if item.startswith('_'):
            raise AttributeError(item)
        if item in self._config:
            return self._config[item]
        raise AttributeError(f"'Config' object has no attribute '{item}'")

    @property
    def sidecar_settings(self) -> SidecarSettings:
        """Get the settings consumed by the injection engine."""
        return SidecarSettings(
            agent_image=self._config['JAEGER_AGENT_IMAGE'],
            agent_version=str(self._config['JAEGER_VERSION']),
            max_cpu=str(self._config['JAEGER_AGENT_MAX_CPU']),
            max_memory=str(self._config['JAEGER_AGENT_MAX_MEMORY']),
        )

    @staticmethod
    def convert_env_value(key: str, env_value: str, type_hint: Type) -> Any:
        """Convert environment variable to the appropriate type.

        Args:
            key: Configuration key
            env_value: Environment variable value
            type_hint: Type hint for the value

        Returns:
            Converted value
        """
        origin = get_origin(type_hint)
        args = get_args(type_hint)

        if origin is Union:
            for arg in args:
                if arg is type(None):
                    if env_value.lower() in ("none", "null", ""):
                        return None
                else:
                    try:
                        return Config.convert_env_value(key, env_value, arg)
                    except (ConfigError, ValueError):
                        continue
            raise ConfigError(f"Cannot convert {env_value} to any of {args}")

        if type_hint is bool:
            return env_value.lower() in ("true", "1", "yes", "on")
        elif type_hint is int:
            try:
                return int(env_value)
            except ValueError as e:
                raise ConfigError(f"Invalid integer {env_value!r} for key {key}") from e
        elif type_hint is float:
            try:
                return float(env_value)
            except ValueError as e:
                raise ConfigError(f"Invalid float {env_value!r} for key {key}") from e
        elif type_hint in (str, Any):
            return env_value
        elif origin is list or origin is List:
            return json.loads(env_value)
        else:
            raise ConfigError(f"Unsupported type {type_hint} for key {key}")

    @classmethod
    def load_config(cls, config_path: str) -> Dict[str, Any]:
        """Load configuration overrides from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of overrides to pass to Config()
        """
        if not os.path.exists(config_path):
            raise ConfigError(f"Configuration not found at '{config_path}'")

        with open(config_path, "r") as f:
            try:
                custom_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in configuration file '{config_path}': {e}") from e

        if not isinstance(custom_config, dict):
            raise ConfigError(f"Configuration file '{config_path}' must contain a JSON object")

        return custom_config
