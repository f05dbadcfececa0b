"""Configuration module for svcdocs."""

from .loader import ConfigLoader, load_config
from .models import DocsConfig, DocsSettings

__all__ = [
    "ConfigLoader",
    "DocsConfig",
    "DocsSettings",
    "load_config",
]
