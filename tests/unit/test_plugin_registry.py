"""Tests for the plugin registry and built-in plugins."""

import pytest

from twconfig.models.plugin import (
    AspectRatioPlugin,
    FormsPlugin,
    Plugin,
    PluginRegistry,
    TypographyPlugin,
    default_registry,
)
from twconfig.utils.exceptions import MalformedConfigError, PluginResolutionError


class LineClampPlugin(Plugin):
    name = "line-clamp"
    package = "@tailwindcss/line-clamp"

    def _check_options(self, options, field):
        pass


class TestDefaultRegistry:

    def test_builtins_registered(self):
        registry = default_registry()

        assert registry.names() == ["aspect-ratio", "container-queries", "forms", "typography"]
        assert len(registry) == 4

    @pytest.mark.parametrize("handle", ["forms", "@tailwindcss/forms"])
    def test_resolve_by_name_or_package(self, handle):
        assert isinstance(default_registry().resolve(handle), FormsPlugin)

    def test_contains(self):
        registry = default_registry()

        assert "@tailwindcss/typography" in registry
        assert "line-clamp" not in registry

    def test_unknown_handle(self):
        with pytest.raises(PluginResolutionError) as exc_info:
            default_registry().resolve("line-clamp", field="plugins[2]")

        assert exc_info.value.field == "plugins[2]"
        assert "forms" in str(exc_info.value)

    def test_registries_are_independent(self):
        first = default_registry()
        first.register(LineClampPlugin())

        assert "line-clamp" in first
        assert "line-clamp" not in default_registry()


class TestRegister:

    def test_register_custom_plugin(self):
        registry = PluginRegistry()
        registry.register(LineClampPlugin())

        assert registry.resolve("@tailwindcss/line-clamp").name == "line-clamp"

    def test_conflicting_handle_rejected(self):
        class OtherForms(LineClampPlugin):
            name = "other-forms"
            package = "@tailwindcss/forms"

        registry = default_registry()
        with pytest.raises(ValueError):
            registry.register(OtherForms())

    def test_reregistering_same_plugin_is_allowed(self):
        registry = default_registry()
        registry.register(FormsPlugin())

        assert len(registry) == 4


class TestOptions:

    def test_forms_strategy(self):
        FormsPlugin().validate_options({"strategy": "class"})

        with pytest.raises(MalformedConfigError) as exc_info:
            FormsPlugin().validate_options({"strategy": "inline"}, field="plugins[0]")
        assert exc_info.value.field == "plugins[0].options.strategy"

    def test_typography_class_name(self):
        TypographyPlugin().validate_options({"className": "wysiwyg"})

        with pytest.raises(MalformedConfigError):
            TypographyPlugin().validate_options({"className": ""})

    def test_unknown_option(self):
        with pytest.raises(MalformedConfigError) as exc_info:
            AspectRatioPlugin().validate_options({"ratio": "16/9"})
        assert exc_info.value.field == "plugins.options"


class TestRequireExpression:

    def test_without_options(self):
        assert FormsPlugin().require_expression() == "require('@tailwindcss/forms')"

    def test_with_options(self):
        expression = FormsPlugin().require_expression({"strategy": "class"})
        assert expression == "require('@tailwindcss/forms')({\"strategy\": \"class\"})"
