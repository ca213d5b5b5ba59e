"""Core business logic for bumpwright.

This module contains the fundamental building blocks:
- Conventional commit classification
- Next version inference (semver, prefixes preserved)
- Releases, their history and JSON representation
"""

from __future__ import annotations

from bumpwright.core.commits import CommitKind, classify_commit, classify_commits
from bumpwright.core.release import Commit, Release, ReleaseHistory
from bumpwright.core.version import (
    INITIAL_VERSION,
    BumpType,
    PrefixedVersion,
    apply_bump,
    calculate_bump,
    infer_next_version,
)

__all__ = [
    "INITIAL_VERSION",
    # Version
    "BumpType",
    # Commits
    "Commit",
    "CommitKind",
    "PrefixedVersion",
    # Releases
    "Release",
    "ReleaseHistory",
    "apply_bump",
    "calculate_bump",
    "classify_commit",
    "classify_commits",
    "infer_next_version",
]
