"""
Utility functions for rigmap.

Includes configuration management.
"""

from .config import (
    AutoMapConfig,
    DEFAULT_CONFIG,
    load_config,
    save_config,
)

__all__ = [
    "AutoMapConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
]
