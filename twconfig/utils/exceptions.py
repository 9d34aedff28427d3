from pathlib import Path
from typing import Optional, Union

class TwConfigError(Exception):
    """Base exception for all twconfig errors."""
    pass

class NotFoundError(TwConfigError):
    """Raised when the descriptor file does not exist."""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)

class MalformedConfigError(TwConfigError):
    """Raised when a descriptor does not conform to the recognized schema."""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)

class PluginResolutionError(MalformedConfigError):
    """Raised when a plugin handle is not known to the plugin registry."""
    pass

class ConfigurationError(TwConfigError):
    """Exception raised for tool settings errors."""
    pass

class FileAccessError(TwConfigError):
    """Exception raised for file access-related errors."""
    pass

class ExportError(TwConfigError):
    """Exception raised for export generation errors."""
    pass
