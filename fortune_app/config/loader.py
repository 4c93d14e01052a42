"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

import structlog
import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "fortune.yaml"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


@dataclass(frozen=True)
class ConfigLoader:
    """
    Merges generator settings from three sources.

    Built-in defaults are overlaid by ``fortune.yaml`` in the config
    directory, which is overlaid by caller overrides. Sections merge key by
    key, so an override only has to name the values it changes.
    """

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        return cls(
            config_dir=Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR,
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """
        Read the YAML tier.

        A missing or empty file contributes nothing.

        Raises:
            ConfigurationError: If the file is not valid YAML or its top level
                is not a mapping of sections
        """
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, encoding="utf-8") as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {self.config_file}: {e}") from e

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{self.config_file} must contain a mapping of sections",
                errors=[type(file_config).__name__]
            )

        logger.debug("Loaded config file", path=str(self.config_file), sections=sorted(file_config))
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. YAML file overrides
        3. Built-in defaults (lowest priority)
        """
        config = asdict(self.defaults)

        for layer in (self.load_file_config(), overrides or {}):
            config = _deep_merge(config, layer)

        return config

    def load_validated(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge all tiers and validate the result.

        Raises:
            ConfigurationError: If the YAML tier is unreadable or any section
                fails validation
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError(f"Invalid configuration: {'; '.join(error_msgs)}", errors=errors)

        return config


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)

    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
