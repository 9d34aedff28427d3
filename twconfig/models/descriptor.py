from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


def freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become mapping proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze: plain dicts and lists, safe to serialize or modify."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class PluginHandle:
    """A plugin reference as declared in the descriptor."""
    name: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "options", freeze(self.options))

    def to_dict(self) -> Union[str, Dict[str, Any]]:
        if not self.options:
            return self.name
        return {"name": self.name, "options": thaw(self.options)}


@dataclass(frozen=True)
class ConfigurationDescriptor:
    """Read-only configuration consumed by the CSS generation engine.

    Nested theme values are frozen as well, so a loaded descriptor can be
    shared between readers without copying.
    """
    content_globs: Tuple[str, ...] = ()
    theme_extensions: Mapping[str, Any] = field(default_factory=dict)
    plugins: Tuple[PluginHandle, ...] = ()
    source: Optional[Path] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "content_globs", tuple(self.content_globs))
        object.__setattr__(self, "theme_extensions", freeze(self.theme_extensions))
        object.__setattr__(self, "plugins", tuple(
            p if isinstance(p, PluginHandle) else PluginHandle(p) for p in self.plugins
        ))

    @property
    def plugin_names(self) -> List[str]:
        return [plugin.name for plugin in self.plugins]

    @property
    def is_degenerate(self) -> bool:
        """True when no content is scanned, so the stylesheet will be empty."""
        return not self.content_globs

    def to_dict(self) -> Dict[str, Any]:
        """Return the descriptor in its file-format shape."""
        return {
            "content": list(self.content_globs),
            "theme": {"extend": thaw(self.theme_extensions)},
            "plugins": [plugin.to_dict() for plugin in self.plugins],
        }
