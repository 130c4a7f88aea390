"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Union

from ..logging_config import get_logger
from .naming import has_only_identifier_chars

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class GeneratorConfig:
    """Naming and typing options for one generation run."""

    # Output settings
    package_name: str = "com.example.api"
    api_class_name: str = "GeneratedAPI"

    # Naming settings
    class_postfix: str = ""
    getter_prefix: str = ""

    # Reference accessor return types
    parameterize_class_names: bool = False
    parameterized_types: FrozenSet[str] = frozenset()

    # Custom settings (unknown keys from config files)
    custom: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        """Normalize parameterized types to a frozenset."""
        types = self.parameterized_types
        if isinstance(types, str):
            types = [types]
        if not isinstance(types, frozenset):
            object.__setattr__(self, "parameterized_types", frozenset(types or ()))

    def should_parameterize(self, referenced_type: str) -> bool:
        """Whether a reference to this type gets a generic return type."""
        return (
            self.parameterize_class_names
            or referenced_type in self.parameterized_types
        )

    def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with some settings replaced."""
        values = self.to_dict()
        values.update(overrides)
        return GeneratorConfig(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "package_name": self.package_name,
            "api_class_name": self.api_class_name,
            "class_postfix": self.class_postfix,
            "getter_prefix": self.getter_prefix,
            "parameterize_class_names": self.parameterize_class_names,
            "parameterized_types": self.parameterized_types,
            "custom": dict(self.custom),
        }


# camelCase spellings accepted in config files
CONFIG_KEY_ALIASES = {
    "packageName": "package_name",
    "apiClassName": "api_class_name",
    "apiClassname": "api_class_name",
    "classNamePostfix": "class_postfix",
    "classPostfix": "class_postfix",
    "getterPrefix": "getter_prefix",
    "parameterizeClassNames": "parameterize_class_names",
    "parameterizeAllClassNames": "parameterize_class_names",
    "parameterizedTypes": "parameterized_types",
}


STRING_SETTINGS = ("package_name", "api_class_name", "class_postfix", "getter_prefix")


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration manager.

        Args:
            defaults: Settings applied before files and overrides
        """
        self._defaults: Dict[str, Any] = dict(defaults or {})

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = self._normalize_keys(self._defaults)

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(self._normalize_keys(file_config))

        # Apply custom overrides
        if custom_config:
            base_config.update(self._normalize_keys(custom_config))

        return self._dict_to_config(base_config)

    def _normalize_keys(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        return {CONFIG_KEY_ALIASES.get(k, k): v for k, v in config_dict.items()}

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        self._check_types(config_args)

        return GeneratorConfig(**config_args)

    def _check_types(self, config_args: Dict[str, Any]):
        """Reject setting values of the wrong JSON type."""
        for key in STRING_SETTINGS:
            if key in config_args and not isinstance(config_args[key], str):
                raise ConfigError(
                    f"{key} must be a string, got {type(config_args[key]).__name__}"
                )

        flag = config_args.get("parameterize_class_names", False)
        if not isinstance(flag, bool):
            raise ConfigError(
                f"parameterize_class_names must be true or false, got {flag!r}"
            )

        types = config_args.get("parameterized_types")
        if types is None:
            return
        if not isinstance(types, (list, tuple, set, frozenset)) or not all(
            isinstance(t, str) for t in types
        ):
            raise ConfigError(
                f"parameterized_types must be a list of type names, got {types!r}"
            )

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = config.to_dict()
        config_dict["parameterized_types"] = sorted(config.parameterized_types)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        from ..languages.java.naming import (
            is_valid_java_identifier,
            validate_java_package_name,
        )

        warnings = []

        for error in validate_java_package_name(config.package_name):
            warnings.append(f"Invalid package_name: {error}")

        if not is_valid_java_identifier(config.api_class_name):
            warnings.append(f"Invalid api_class_name: {config.api_class_name!r}")

        if not has_only_identifier_chars(config.class_postfix):
            warnings.append(f"Invalid class_postfix: {config.class_postfix!r}")

        if not has_only_identifier_chars(config.getter_prefix):
            warnings.append(f"Invalid getter_prefix: {config.getter_prefix!r}")

        if config.parameterize_class_names and config.parameterized_types:
            warnings.append(
                "parameterized_types is ignored while parameterize_class_names is set"
            )

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

