"""Command line interface for bumpwright."""

from __future__ import annotations

from bumpwright.cli.main import app

__all__ = ["app"]
