"""Data models and configurations."""

from .config import ToolSettings
from .content import ContentResolution
from .descriptor import ConfigurationDescriptor, PluginHandle
from .inspection import Diagnostic, InspectionResult
from .plugin import Plugin, PluginRegistry, default_registry

__all__ = [
    'ToolSettings',
    'ContentResolution',
    'ConfigurationDescriptor',
    'PluginHandle',
    'Diagnostic',
    'InspectionResult',
    'Plugin',
    'PluginRegistry',
    'default_registry'
]
