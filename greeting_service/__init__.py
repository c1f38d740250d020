"""Greeting service: a configured greeting served over FastAPI."""

from .processor import BaseProcessor, StatelessAction
from .api import create_app, ServiceConfig
from .config import Settings, load_settings
from .errors import ConfigurationError, ConfigurationMissing, GreetingServiceError, MissingParameter
from .greeting import GreetingProcessor

__version__ = "1.0.0"


__all__ = [
    "BaseProcessor",
    "StatelessAction",
    "create_app",
    "ServiceConfig",
    "Settings",
    "load_settings",
    "GreetingServiceError",
    "ConfigurationError",
    "ConfigurationMissing",
    "MissingParameter",
    "GreetingProcessor",
]
