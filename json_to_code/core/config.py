"""
Generator configuration.

Settings are merged from the language defaults, an optional JSON file and
explicit overrides, in that order. Keys the generators do not know end up in
``GeneratorConfig.custom``.
"""

import json
import re
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


JSON_INCLUDE_POLICIES = {
    "ALWAYS",
    "NON_NULL",
    "NON_ABSENT",
    "NON_EMPTY",
    "NON_DEFAULT",
}

_JAVA_PACKAGE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")

LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "typescript": {
        "indent_size": 2,
        "export_declarations": True,
    },
    "java": {
        "package_name": "com.example.dto",
        "indent_size": 2,
        "use_lombok": True,
        "json_include": "NON_NULL",
    },
}


@dataclass
class GeneratorConfig:
    """Settings shared by all back-ends; each reads the ones it needs."""

    # Java package of generated classes
    package_name: str = ""

    indent_size: int = 2
    use_tabs: bool = False

    # TypeScript
    export_declarations: bool = True

    # Java
    use_lombok: bool = True
    json_include: Optional[str] = "NON_NULL"

    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


# Expected JSON types of the known settings; None is allowed where listed
_SETTING_TYPES = {
    "package_name": (str,),
    "indent_size": (int,),
    "use_tabs": (bool,),
    "export_declarations": (bool,),
    "use_lombok": (bool,),
    "json_include": (str, type(None)),
}


class ConfigManager:
    """Merges language defaults, config files and overrides."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        source = LANGUAGE_DEFAULTS if defaults is None else defaults
        self._configs = {language: dict(values) for language, values in source.items()}

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Primary language name
            custom_config: Overrides applied last
            config_file: Path to a JSON configuration file

        Returns:
            Merged configuration for the language

        Raises:
            ConfigError: If the file cannot be used or a setting has the wrong type
        """
        merged = dict(self._configs.get(language, {}))

        if config_file:
            merged.update(self._load_config_file(config_file))

        if custom_config:
            merged.update(custom_config)

        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            config = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        known = {f.name for f in fields(GeneratorConfig)}
        settings = {}
        custom = config_dict.get("custom") or {}
        if not isinstance(custom, dict):
            raise ConfigError(f"Setting 'custom' must be dict, got {custom!r}")
        custom = dict(custom)

        for key, value in config_dict.items():
            if key == "custom":
                continue
            if key not in known:
                custom[key] = value
                continue

            expected = _SETTING_TYPES[key]
            # bool is an int, but not a valid indent size
            if not isinstance(value, expected) or (
                key == "indent_size" and isinstance(value, bool)
            ):
                names = " or ".join(
                    "null" if t is type(None) else t.__name__ for t in expected
                )
                raise ConfigError(f"Setting '{key}' must be {names}, got {value!r}")
            settings[key] = value

        if isinstance(settings.get("json_include"), str):
            settings["json_include"] = settings["json_include"].upper()

        return GeneratorConfig(custom=custom, **settings)

    def list_languages(self) -> List[str]:
        """Get list of languages with default configurations."""
        return list(self._configs)

    def validate_config(self, config: GeneratorConfig, language: str) -> List[str]:
        """
        Check settings that are well-typed but unusable.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if language == "java":
            if not _JAVA_PACKAGE.match(config.package_name or ""):
                warnings.append(f"Invalid Java package name: {config.package_name}")

            if (
                config.json_include is not None
                and config.json_include not in JSON_INCLUDE_POLICIES
            ):
                warnings.append(f"Invalid json_include: {config.json_include}")

        return warnings


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Merge the configuration of ``language`` with the global manager."""
    return get_config_manager().get_config(language, custom_config, config_file)
