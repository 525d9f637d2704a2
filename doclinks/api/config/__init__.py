"""Configuration models for a link check run."""

from .BrowserConfig import BrowserConfig
from .CheckConfig import CheckConfig
from .LogConfig import LogConfig
from .RepositoryConfig import RepositoryConfig

__all__ = [
    "BrowserConfig",
    "CheckConfig",
    "LogConfig",
    "RepositoryConfig",
]
