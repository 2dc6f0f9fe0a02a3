"""
Back-end registry: maps a language selector to its generator class.

The built-in back-ends are registered lazily the first time the global
registry is requested.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config
from .logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Language names and aliases mapped to generator classes."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'typescript', 'java')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative selectors for this language
            replace: Replace an existing registration instead of keeping it

        Raises:
            RegistryError: If generator class is invalid or an alias conflicts
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError(
                f"{generator_class!r} is not a CodeGenerator subclass"
            )

        primary = language.lower()
        if primary in self._generators and not replace:
            logger.debug("Language %s already registered", primary)
            return

        alias_keys = {alias.lower() for alias in aliases or []} - {primary}
        if not replace:
            self._check_aliases(primary, alias_keys)

        self._generators[primary] = generator_class
        self._aliases.update(dict.fromkeys(alias_keys, primary))

    def _check_aliases(self, primary: str, alias_keys: set):
        """Reject aliases that shadow a language or belong to another one."""
        for alias_key in sorted(alias_keys):
            if alias_key in self._generators:
                raise RegistryError(
                    f"Alias '{alias_key}' conflicts with existing primary language"
                )
            target = self._aliases.get(alias_key, primary)
            if target != primary:
                raise RegistryError(
                    f"Alias '{alias_key}' already points to '{target}'"
                )

    def resolve_language(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If language not found
        """
        key = language.lower()
        if key in self._generators:
            return key
        if key in self._aliases:
            return self._aliases[key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """Get generator class for a language name or alias."""
        return self._generators[self.resolve_language(language)]

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Create a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, overrides dict, JSON config file path, or
                None for the language defaults

        Raises:
            RegistryError: If the language is unknown or the config type is invalid
            ConfigError: If a config file cannot be loaded
        """
        primary = self.resolve_language(language)
        return self._generators[primary](self._resolve_config(primary, config))

    def _resolve_config(self, primary: str, config: ConfigSource) -> GeneratorConfig:
        if isinstance(config, GeneratorConfig):
            return config
        if isinstance(config, (str, Path)):
            return load_config(primary, config_file=config)
        if isinstance(config, dict):
            return load_config(primary, custom_config=config)
        if config is None:
            return load_config(primary)
        raise RegistryError(f"Invalid config type: {type(config).__name__}")

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Get all aliases for a specific primary language."""
        primary = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == primary
        )

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is supported."""
        key = language.lower()
        return key in self._generators or key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        Returns:
            Dict with name, class, file extension, aliases and the declaration
            naming pattern (e.g. ``I*`` or ``*Dto``)

        Raises:
            RegistryError: If language not found
        """
        primary = self.resolve_language(language)
        generator = self.create_generator(primary)
        naming = generator.naming

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(primary),
            "naming": f"{naming.prefix}*{naming.postfix}",
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.java import JavaGenerator
    from .languages.typescript import TypeScriptGenerator

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.register("java", JavaGenerator)


# Shortcuts on the global registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Describe a supported language."""
    return get_registry().get_language_info(language)
