"""Utility functions and helpers."""

from .logger import setup_logger
from .exceptions import (
    TwConfigError,
    NotFoundError,
    MalformedConfigError,
    PluginResolutionError,
    ConfigurationError,
    FileAccessError,
    ExportError
)

__all__ = [
    'setup_logger',
    'TwConfigError',
    'NotFoundError',
    'MalformedConfigError',
    'PluginResolutionError',
    'ConfigurationError',
    'FileAccessError',
    'ExportError'
]
