"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Any, Iterable, Mapping, Optional, Tuple, Union

from ...logging_config import get_logger
from .imports import ImportMap

logger = get_logger(__name__)

_GRAPHQL_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable configuration shared by a whole rendering pass."""

    # Base class injected into every generated class
    super_class: Optional[str] = None

    # Imports added to every generated module, module -> names
    extra_imports: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    # GraphQL type name -> Python type name, overrides built-ins
    extra_types: Mapping[str, str] = field(default_factory=dict)

    # Code style
    indent_size: int = 4

    # Output settings (used by the CLI)
    output_file: Optional[str] = None

    def __post_init__(self):
        imports = {
            module: (names,) if isinstance(names, str) else tuple(names)
            for module, names in (self.extra_imports or {}).items()
        }
        object.__setattr__(self, "extra_imports", MappingProxyType(imports))
        object.__setattr__(
            self, "extra_types", MappingProxyType(dict(self.extra_types or {}))
        )

    @property
    def indent(self) -> str:
        return " " * self.indent_size

    @property
    def import_seed(self) -> ImportMap:
        """Configured extra imports as an ImportMap."""
        return ImportMap.from_mapping(self.extra_imports)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, suitable for JSON."""
        return {
            "super_class": self.super_class,
            "extra_imports": {k: list(v) for k, v in self.extra_imports.items()},
            "extra_types": dict(self.extra_types),
            "indent_size": self.indent_size,
            "output_file": self.output_file,
        }


# Alternative spellings accepted in config files
KEY_ALIASES = {
    "super": "super_class",
    "superClass": "super_class",
    "extraImports": "extra_imports",
    "extraTypes": "extra_types",
    "indentSize": "indent_size",
    "outputFile": "output_file",
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "super_class": None,
            "extra_imports": {},
            "extra_types": {},
            "indent_size": 4,
            "output_file": None,
        }

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
        base_config = dict(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(self._normalize_keys(file_config))

        if custom_config:
            base_config.update(self._normalize_keys(custom_config))

        return self._dict_to_config(base_config)

    def _normalize_keys(self, config: Dict[str, Any]) -> Dict[str, Any]:
        return {KEY_ALIASES.get(key, key): value for key, value in config.items()}

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
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}
        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        _check_mapping(config_dict.get("extra_imports"), "extra_imports")
        _check_mapping(config_dict.get("extra_types"), "extra_types")

        for module, names in (config_dict.get("extra_imports") or {}).items():
            if isinstance(names, str):
                continue
            if not isinstance(names, (list, tuple)) or not all(
                isinstance(name, str) for name in names
            ):
                raise ConfigError(
                    f"extra_imports[{module!r}] must be a name or a list of names, "
                    f"got {names!r}"
                )

        for type_name, target in (config_dict.get("extra_types") or {}).items():
            if not isinstance(target, str):
                raise ConfigError(
                    f"extra_types[{type_name!r}] must be a type name, got {target!r}"
                )

        super_class = config_dict.get("super_class")
        if super_class is not None and not isinstance(super_class, str):
            raise ConfigError(f"super_class must be a class name, got {super_class!r}")

        indent_size = config_dict.get("indent_size", 4)
        if not isinstance(indent_size, int) or isinstance(indent_size, bool):
            raise ConfigError(f"indent_size must be an integer, got {indent_size!r}")

        return GeneratorConfig(**config_dict)

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.super_class and not all(
            part.isidentifier() for part in config.super_class.split(".")
        ):
            warnings.append(f"Invalid base class name: {config.super_class}")

        for type_name in config.extra_types:
            if not _GRAPHQL_NAME.match(type_name):
                warnings.append(f"Invalid GraphQL type name in extra_types: {type_name}")

        for module, names in config.extra_imports.items():
            if not all(part.isidentifier() for part in module.split(".")):
                warnings.append(f"Invalid module name in extra_imports: {module}")
            if not names:
                warnings.append(f"No names listed for module {module} in extra_imports")

        if config.indent_size < 1:
            warnings.append(f"indent_size must be positive: {config.indent_size}")

        return warnings


def _check_mapping(value: Optional[Iterable], key: str) -> None:
    if value is not None and not isinstance(value, Mapping):
        raise ConfigError(f"{key} must be a mapping, got {type(value).__name__}")


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

