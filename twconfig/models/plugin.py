"""Plugin capabilities and the name-keyed registry used to resolve plugin handles.

The CSS engine loads plugins with ``require('<package>')``. Here every plugin
the descriptor may reference is known up front and looked up by name.
"""
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .descriptor import thaw
from ..utils.exceptions import MalformedConfigError, PluginResolutionError


class Plugin(ABC):
    """A plugin the external engine can load during generation."""

    name: str = ""
    package: str = ""
    aliases: Tuple[str, ...] = ()
    option_names: FrozenSet[str] = frozenset()

    def handles(self) -> Tuple[str, ...]:
        """All handles under which this plugin may be referenced."""
        return (self.name, self.package) + tuple(self.aliases)

    def validate_options(self, options: Mapping[str, Any], field: str = "plugins") -> None:
        """
        Validate plugin options declared in the descriptor.

        Raises:
            MalformedConfigError: If an option is unknown or has a bad value
        """
        unknown = sorted(set(options) - self.option_names)
        if unknown:
            raise MalformedConfigError(
                f"Unknown option(s) {unknown} for plugin '{self.name}'", field=f"{field}.options"
            )
        self._check_options(options, f"{field}.options")

    @abstractmethod
    def _check_options(self, options: Mapping[str, Any], field: str) -> None:
        """Check the values of recognised options."""
        pass

    def require_expression(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """JavaScript expression the engine evaluates to load this plugin."""
        expression = f"require('{self.package}')"
        if options:
            expression += f"({json.dumps(thaw(options))})"
        return expression

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, package={self.package!r})"


class FormsPlugin(Plugin):
    """Form element reset styles."""

    name = "forms"
    package = "@tailwindcss/forms"
    option_names = frozenset({"strategy"})
    STRATEGIES = ("base", "class")

    def _check_options(self, options: Mapping[str, Any], field: str) -> None:
        strategy = options.get("strategy", "base")
        if strategy not in self.STRATEGIES:
            raise MalformedConfigError(
                f"strategy must be one of {list(self.STRATEGIES)}, got {strategy!r}",
                field=f"{field}.strategy",
            )


class TypographyPlugin(Plugin):
    """Prose styles for rendered content."""

    name = "typography"
    package = "@tailwindcss/typography"
    option_names = frozenset({"className"})

    def _check_options(self, options: Mapping[str, Any], field: str) -> None:
        class_name = options.get("className", "prose")
        if not isinstance(class_name, str) or not class_name:
            raise MalformedConfigError("className must be a non-empty string", field=f"{field}.className")


class AspectRatioPlugin(Plugin):
    name = "aspect-ratio"
    package = "@tailwindcss/aspect-ratio"

    def _check_options(self, options: Mapping[str, Any], field: str) -> None:
        pass


class ContainerQueriesPlugin(Plugin):
    name = "container-queries"
    package = "@tailwindcss/container-queries"

    def _check_options(self, options: Mapping[str, Any], field: str) -> None:
        pass


BUILTIN_PLUGINS = (FormsPlugin, TypographyPlugin, AspectRatioPlugin, ContainerQueriesPlugin)


class PluginRegistry:
    """Lookup table from plugin handle to plugin capability."""

    def __init__(self, plugins: Optional[Iterable[Plugin]] = None):
        self._plugins: Dict[str, Plugin] = {}
        self._index: Dict[str, str] = {}
        for plugin in plugins or ():
            self.register(plugin)

    def register(self, plugin: Plugin) -> None:
        """Register a plugin under its name, package and aliases."""
        for handle in plugin.handles():
            owner = self._index.get(handle)
            if owner is not None and owner != plugin.name:
                raise ValueError(f"Plugin handle '{handle}' is already registered by '{owner}'")
        self._plugins[plugin.name] = plugin
        for handle in plugin.handles():
            self._index[handle] = plugin.name

    def resolve(self, handle: str, field: Optional[str] = None) -> Plugin:
        """
        Return the plugin registered under ``handle``.

        Raises:
            PluginResolutionError: If no plugin is registered under the handle
        """
        name = self._index.get(handle)
        if name is None:
            raise PluginResolutionError(
                f"Unknown plugin '{handle}'. Available plugins: {', '.join(self.names())}",
                field=field,
            )
        return self._plugins[name]

    def names(self) -> List[str]:
        return sorted(self._plugins)

    def __contains__(self, handle: object) -> bool:
        return handle in self._index

    def __len__(self) -> int:
        return len(self._plugins)


def default_registry() -> PluginRegistry:
    """Registry populated with the built-in plugins."""
    return PluginRegistry(plugin_cls() for plugin_cls in BUILTIN_PLUGINS)
