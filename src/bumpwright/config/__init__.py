"""Configuration management for bumpwright."""

from __future__ import annotations

from bumpwright.config.loader import load_config
from bumpwright.config.models import BumpPolicy, BumpwrightConfig

__all__ = [
    "BumpPolicy",
    "BumpwrightConfig",
    "load_config",
]
