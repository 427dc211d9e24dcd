"""Exception hierarchy for solid_principles."""

from .base import SolidPrinciplesError
from .config import ConfigurationError, InvalidConfigError
from .io import FileAccessError

__all__ = [
    "SolidPrinciplesError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidConfigError",
]
