import os
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from ..exceptions import ConfigurationError
from .policy import (
    ConfigOption, CorsPolicy, build_policy,
    with_origins, with_methods, with_headers, with_max_age,
)


DEFAULT_CONFIG_FILE = "cors.yaml"
CONFIG_SECTION = "cors"

# Environment variable -> settings field
ENV_MAPPINGS = {
    "CORS_ALLOWED_ORIGINS": "origins",
    "CORS_ALLOWED_METHODS": "methods",
    "CORS_ALLOWED_HEADERS": "headers",
    "CORS_MAX_AGE": "max_age",
}

LIST_FIELDS = ("origins", "methods", "headers")


class CorsSettings(BaseModel):
    """CORS settings as read from configuration; None means not configured"""
    origins: Optional[List[str]] = None
    methods: Optional[List[str]] = None
    headers: Optional[List[str]] = None
    max_age: Optional[float] = Field(default=None, allow_inf_nan=False)


class ConfigManager:
    """Configuration Manager Class"""

    def __init__(self, config_file: Optional[Union[str, Path]] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        """
        Initialize Configuration Manager

        Args:
            config_file: YAML file holding a `cors:` section. Defaults to
                $CORS_CONFIG_FILE, then cors.yaml in the working directory.
            overrides: Values taking precedence over file and environment
        """
        if config_file is None:
            config_file = os.environ.get("CORS_CONFIG_FILE", DEFAULT_CONFIG_FILE)
        self.config_file = Path(config_file)
        self._overrides = dict(overrides or {})
        self._settings = CorsSettings()

        self._load_config()

    def _load_config(self):
        """Load settings: file, then environment, then overrides"""
        logger.info("Load CORS configuration...")

        config = {}

        file_config = self._load_yaml_file(self.config_file)
        if file_config:
            section = file_config.get(CONFIG_SECTION)
            if section is not None:
                if not isinstance(section, dict):
                    raise ConfigurationError(
                        f"'{CONFIG_SECTION}' must be a mapping", source=str(self.config_file)
                    )
                config.update(section)
                logger.debug(f"CORS file configuration loaded: {self.config_file}")

        config = self._apply_env_overrides(config)
        config.update(self._overrides)

        self._settings = self._validate(config)

        configured = [name for name, value in self._settings_items() if value is not None]
        logger.info(f"CORS configuration loading complete - configured: {configured or 'nothing'}")

    def _load_yaml_file(self, file_path: Path) -> Optional[Dict[str, Any]]:
        """Load a YAML file, treating unreadable files as absent"""
        if not file_path.exists():
            return None

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Unable to load configuration file {file_path}: {e}")
            return None

        if content is None:
            return {}
        if not isinstance(content, dict):
            logger.warning(f"Ignoring configuration file {file_path}: top level is not a mapping")
            return None
        return content

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        result = config.copy()
        for env_var, field in ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value:
                result[field] = env_value
                logger.debug(f"CORS setting '{field}' taken from {env_var}")
        return result

    def _validate(self, config: Dict[str, Any]) -> CorsSettings:
        data = {}
        for key, value in config.items():
            if key in LIST_FIELDS:
                value = _split_list(value)
            data[key] = value

        unknown = set(data) - set(ENV_MAPPINGS.values())
        if unknown:
            logger.warning(f"Ignoring unknown CORS settings: {sorted(unknown)}")
            for key in unknown:
                del data[key]

        try:
            return CorsSettings(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid CORS settings: {e}", source=str(self.config_file)) from e

    def _settings_items(self):
        settings = self._settings
        return [
            ("origins", settings.origins),
            ("methods", settings.methods),
            ("headers", settings.headers),
            ("max_age", settings.max_age),
        ]

    @property
    def settings(self) -> CorsSettings:
        """Get loaded settings"""
        return self._settings

    def get_options(self) -> List[ConfigOption]:
        """
        Get configuration options for the loaded settings

        Returns:
            One option per configured field
        """
        settings = self._settings
        options = []
        if settings.origins is not None:
            options.append(with_origins(*settings.origins))
        if settings.methods is not None:
            options.append(with_methods(*settings.methods))
        if settings.headers is not None:
            options.append(with_headers(*settings.headers))
        if settings.max_age is not None:
            options.append(with_max_age(settings.max_age))
        return options

    def build_policy(self) -> CorsPolicy:
        """Build a policy from the loaded settings"""
        return build_policy(*self.get_options())

    def reload_config(self):
        """Reload configuration"""
        logger.info("Reload CORS configuration...")
        self._load_config()


def _split_list(value: Any) -> Any:
    """Accept comma-separated strings for list settings"""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
