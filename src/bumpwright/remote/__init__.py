"""Forge (GitHub, GitLab, Gitea, Bitbucket) integration.

Raw API payloads are converted by the forge adapters and joined with the
commits of a release by :func:`reconcile`.
"""

from __future__ import annotations

from bumpwright.remote import bitbucket, gitea, github, gitlab
from bumpwright.remote.adapter import ForgeAdapter
from bumpwright.remote.models import (
    Forge,
    RemoteCommit,
    RemoteContributor,
    RemotePullRequest,
    RemoteReleaseMetadata,
)
from bumpwright.remote.reconcile import reconcile, update_release_metadata

ADAPTERS: dict[Forge, ForgeAdapter] = {
    Forge.GITHUB: github.ADAPTER,
    Forge.GITLAB: gitlab.ADAPTER,
    Forge.GITEA: gitea.ADAPTER,
    Forge.BITBUCKET: bitbucket.ADAPTER,
}


def get_adapter(forge: Forge | str) -> ForgeAdapter:
    """Return the payload adapter of a forge."""
    return ADAPTERS[Forge(forge)]


__all__ = [
    "ADAPTERS",
    "Forge",
    "ForgeAdapter",
    "RemoteCommit",
    "RemoteContributor",
    "RemotePullRequest",
    "RemoteReleaseMetadata",
    "get_adapter",
    "reconcile",
    "update_release_metadata",
]
