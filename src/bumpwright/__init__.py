"""bumpwright: next semantic version and release contributors from commit history."""

from __future__ import annotations

__version__ = "0.1.0"
