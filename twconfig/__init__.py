"""Loader and inspector for utility-CSS configuration descriptors."""

from .models.descriptor import ConfigurationDescriptor, PluginHandle
from .utils.config_loader import DescriptorLoader
from .utils.exceptions import MalformedConfigError, NotFoundError

__version__ = "0.1.0"

def load(path, registry=None) -> ConfigurationDescriptor:
    """Load a descriptor file. See DescriptorLoader.load."""
    return DescriptorLoader.load(path, registry=registry)

__all__ = [
    'load',
    'ConfigurationDescriptor',
    'PluginHandle',
    'DescriptorLoader',
    'MalformedConfigError',
    'NotFoundError'
]
