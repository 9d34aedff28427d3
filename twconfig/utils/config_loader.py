import json
import logging
import math
import os
from pathlib import Path
from typing import Optional, Dict, Any, List, Union
import yaml
from dotenv import load_dotenv
from ..models.config import ToolSettings
from ..models.descriptor import ConfigurationDescriptor, PluginHandle
from ..models.plugin import PluginRegistry, default_registry
from ..utils.exceptions import ConfigurationError, MalformedConfigError, NotFoundError

logger = logging.getLogger("twconfig.config_loader")

class DescriptorLoader:
    """Loads descriptor files (YAML or JSON) into validated ConfigurationDescriptors."""

    RECOGNIZED_FIELDS = ("content", "theme", "plugins")
    RECOGNIZED_THEME_FIELDS = ("extend",)
    JSON_SUFFIXES = (".json",)

    @classmethod
    def load(cls, path: Union[str, Path], registry: Optional[PluginRegistry] = None) -> ConfigurationDescriptor:
        """
        Read, parse and validate a descriptor file.

        Args:
            path: Path to the descriptor file
            registry: Plugin registry used to resolve plugin handles (defaults to the built-ins)

        Returns:
            The loaded ConfigurationDescriptor

        Raises:
            NotFoundError: If the path does not exist or is not a file
            MalformedConfigError: If the file cannot be parsed into the expected shape
        """
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f"Descriptor file not found at {path}", path=path)

        logger.debug(f"Loading descriptor from {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedConfigError(f"Descriptor is not valid UTF-8: {str(e)}")
        except FileNotFoundError:
            raise NotFoundError(f"Descriptor file not found at {path}", path=path)
        except OSError as e:
            raise NotFoundError(f"Descriptor file at {path} could not be read: {str(e)}", path=path)

        fmt = "json" if path.suffix.lower() in cls.JSON_SUFFIXES else "yaml"
        descriptor = cls.loads(text, fmt=fmt, registry=registry, source=path.resolve())
        logger.info(
            f"Loaded descriptor {path}: {len(descriptor.content_globs)} content glob(s), "
            f"{len(descriptor.theme_extensions)} theme extension(s), {len(descriptor.plugins)} plugin(s)"
        )
        return descriptor

    @classmethod
    def loads(
        cls,
        text: str,
        fmt: str = "yaml",
        registry: Optional[PluginRegistry] = None,
        source: Optional[Path] = None
    ) -> ConfigurationDescriptor:
        """
        Parse a descriptor from a string.

        Raises:
            MalformedConfigError: If the text cannot be parsed or validated
        """
        try:
            if fmt == "json":
                data = json.loads(text)
            elif fmt == "yaml":
                data = yaml.safe_load(text)
            else:
                raise ValueError(f"Unsupported descriptor format '{fmt}'")
        except json.JSONDecodeError as e:
            raise MalformedConfigError(f"Error parsing JSON descriptor: {str(e)}")
        except yaml.YAMLError as e:
            raise MalformedConfigError(f"Error parsing YAML descriptor: {str(e)}")

        return cls.from_dict(data, registry=registry, source=source)

    @classmethod
    def from_dict(
        cls,
        data: Any,
        registry: Optional[PluginRegistry] = None,
        source: Optional[Path] = None
    ) -> ConfigurationDescriptor:
        """
        Validate already-parsed descriptor data.

        Raises:
            MalformedConfigError: If the data does not match the descriptor schema
        """
        if registry is None:
            registry = default_registry()

        if not isinstance(data, dict):
            raise MalformedConfigError(
                f"Descriptor must be a mapping at the top level, got {type(data).__name__}"
            )

        unknown = [key for key in data if key not in cls.RECOGNIZED_FIELDS]
        if unknown:
            raise MalformedConfigError(
                f"Unrecognized field. Recognized fields are {list(cls.RECOGNIZED_FIELDS)}", field=str(unknown[0])
            )

        return ConfigurationDescriptor(
            content_globs=cls._validate_content(data),
            theme_extensions=cls._validate_theme(data),
            plugins=cls._validate_plugins(data, registry),
            source=source,
        )

    @staticmethod
    def _validate_content(data: Dict[str, Any]) -> List[str]:
        if "content" not in data:
            raise MalformedConfigError("Required field is missing", field="content")

        content = data["content"]
        if not isinstance(content, list):
            raise MalformedConfigError(
                f"Must be a list of glob patterns, got {type(content).__name__}", field="content"
            )
        for index, pattern in enumerate(content):
            if not isinstance(pattern, str):
                raise MalformedConfigError(
                    f"Glob pattern must be a string, got {type(pattern).__name__}", field=f"content[{index}]"
                )
            if not pattern.strip():
                raise MalformedConfigError("Glob pattern must not be empty", field=f"content[{index}]")

        if not content:
            logger.warning("Descriptor declares no content globs; the generated stylesheet will be empty")
        return content

    @classmethod
    def _validate_theme(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        theme = data.get("theme")
        if theme is None:
            return {}
        if not isinstance(theme, dict):
            raise MalformedConfigError(f"Must be a mapping, got {type(theme).__name__}", field="theme")

        unknown = [key for key in theme if key not in cls.RECOGNIZED_THEME_FIELDS]
        if unknown:
            raise MalformedConfigError(
                "Only theme.extend is recognized; overriding the default theme is not supported",
                field=f"theme.{unknown[0]}",
            )

        extend = theme.get("extend")
        if extend is None:
            return {}
        if not isinstance(extend, dict):
            raise MalformedConfigError(f"Must be a mapping, got {type(extend).__name__}", field="theme.extend")
        cls._check_json_value(extend, "theme.extend")
        return extend

    @classmethod
    def _check_json_value(cls, value: Any, field: str) -> None:
        """Reject values the engine's JSON-shaped config cannot hold (dates, sets, NaN, non-string keys)."""
        if value is None or isinstance(value, (str, bool, int)):
            return
        if isinstance(value, float):
            if not math.isfinite(value):
                raise MalformedConfigError(f"Numbers must be finite, got {value!r}", field=field)
            return
        if isinstance(value, list):
            for index, item in enumerate(value):
                cls._check_json_value(item, f"{field}[{index}]")
            return
        if isinstance(value, dict):
            for key, item in value.items():
                if not isinstance(key, str):
                    raise MalformedConfigError(f"Keys must be strings, got {key!r}", field=field)
                cls._check_json_value(item, f"{field}.{key}")
            return
        raise MalformedConfigError(
            f"Unsupported value of type {type(value).__name__}; use a string, number, boolean, list or mapping",
            field=field,
        )

    @classmethod
    def _validate_plugins(cls, data: Dict[str, Any], registry: PluginRegistry) -> List[PluginHandle]:
        plugins = data.get("plugins")
        if plugins is None:
            return []
        if not isinstance(plugins, list):
            raise MalformedConfigError(f"Must be a list, got {type(plugins).__name__}", field="plugins")

        handles = []
        for index, entry in enumerate(plugins):
            field = f"plugins[{index}]"
            if isinstance(entry, str):
                handle = PluginHandle(entry)
            elif isinstance(entry, dict):
                extra = set(entry) - {"name", "options"}
                if extra:
                    raise MalformedConfigError(f"Unrecognized plugin key(s) {sorted(extra)}", field=field)
                name = entry.get("name")
                if not isinstance(name, str):
                    raise MalformedConfigError("Plugin entry requires a string 'name'", field=field)
                options = entry.get("options")
                if options is None:
                    options = {}
                if not isinstance(options, dict):
                    raise MalformedConfigError("Plugin options must be a mapping", field=f"{field}.options")
                cls._check_json_value(options, f"{field}.options")
                handle = PluginHandle(name, options)
            else:
                raise MalformedConfigError(
                    f"Plugin entry must be a string or a mapping, got {type(entry).__name__}", field=field
                )

            plugin = registry.resolve(handle.name, field=field)
            plugin.validate_options(handle.options, field=field)
            logger.debug(f"Resolved plugin handle '{handle.name}' to {plugin!r}")
            handles.append(handle)
        return handles


class SettingsLoader:
    """Loads tool settings from environment variables and an optional .env file."""

    DEFAULT_DESCRIPTOR_PATH = Path("tailwind.config.yaml")
    VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
    VALID_EXPORT_FORMATS = {"js", "json", "markdown"}

    @classmethod
    def load_settings(cls, env_file: Optional[Path] = None, **overrides: Any) -> ToolSettings:
        """
        Build ToolSettings from TWCONFIG_* environment variables.

        Args:
            env_file: Path to .env file for environment variables
            overrides: Values taking precedence over the environment (None values are ignored)

        Raises:
            ConfigurationError: If the .env file is missing or a setting is invalid
        """
        if env_file:
            if not env_file.exists():
                raise ConfigurationError(f"Environment file not found at {env_file}")
            load_dotenv(env_file)
        else:
            load_dotenv()

        values = {
            "descriptor_path": os.getenv("TWCONFIG_PATH", str(cls.DEFAULT_DESCRIPTOR_PATH)),
            "base_dir": os.getenv("TWCONFIG_BASE_DIR", "."),
            "output_dir": os.getenv("TWCONFIG_OUTPUT_DIR", "build"),
            "log_level": os.getenv("TWCONFIG_LOG_LEVEL", "INFO"),
        }
        formats = os.getenv("TWCONFIG_EXPORT_FORMATS")
        if formats:
            values["export_formats"] = [f.strip() for f in formats.split(",") if f.strip()]
        values.update({key: value for key, value in overrides.items() if value is not None})

        settings = ToolSettings(**values)
        cls._validate_settings(settings)
        return settings

    @classmethod
    def _validate_settings(cls, settings: ToolSettings) -> None:
        if settings.log_level not in cls.VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {settings.log_level}. Must be one of {sorted(cls.VALID_LOG_LEVELS)}"
            )
        unknown = [f for f in settings.export_formats if f not in cls.VALID_EXPORT_FORMATS]
        if unknown:
            raise ConfigurationError(
                f"Unknown export format(s) {unknown}. Must be among {sorted(cls.VALID_EXPORT_FORMATS)}"
            )
