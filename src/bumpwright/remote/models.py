"""Forge-agnostic remote data.

Every supported forge converts its raw API payloads into
:class:`RemoteCommit` and :class:`RemotePullRequest`; the results of
reconciliation are stored as :class:`RemoteContributor` on commits and
:class:`RemoteReleaseMetadata` on releases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Forge(StrEnum):
    """Supported git hosting platforms.

    The declaration order is the serialization order of the per-forge
    fields of releases and commits.
    """

    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"
    BITBUCKET = "bitbucket"


@dataclass(frozen=True, slots=True)
class RemoteCommit:
    """A commit as reported by a forge."""

    id: str
    username: str | None = None


@dataclass(frozen=True, slots=True)
class RemotePullRequest:
    """A pull request (or merge request) as reported by a forge.

    ``merge_commit`` is the SHA of the commit that merged it, the key used
    to join it with local commits.
    """

    number: int
    title: str | None = None
    labels: tuple[str, ...] = ()
    merge_commit: str | None = None


@dataclass(slots=True)
class RemoteContributor:
    """Contributor and pull request data attached to a commit."""

    username: str | None = None
    pr_title: str | None = None
    pr_number: int | None = None
    pr_labels: list[str] = field(default_factory=list)
    is_first_time: bool = False

    @property
    def has_pull_request(self) -> bool:
        return self.pr_title is not None or self.pr_number is not None or bool(self.pr_labels)

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "pr_title": self.pr_title,
            "pr_number": self.pr_number,
            "pr_labels": list(self.pr_labels),
            "is_first_time": self.is_first_time,
        }


@dataclass(slots=True)
class RemoteReleaseMetadata:
    """Contributors of a release on one forge."""

    contributors: list[RemoteContributor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"contributors": [contributor.to_dict() for contributor in self.contributors]}


def empty_contributors() -> dict[Forge, RemoteContributor]:
    """One empty contributor slot per forge."""
    return {forge: RemoteContributor() for forge in Forge}


def empty_release_metadata() -> dict[Forge, RemoteReleaseMetadata]:
    """One empty metadata slot per forge."""
    return {forge: RemoteReleaseMetadata() for forge in Forge}
