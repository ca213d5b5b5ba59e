"""Releases and their commits.

Releases are kept newest first in a :class:`ReleaseHistory`. Each release
refers to its predecessor by index, the oldest known release having no
predecessor.

The JSON representation mirrors the one consumed by changelog templates:
release keys are ``version, commits, commit_id, timestamp, previous``
followed by one key per forge. ``previous`` holds the predecessor release
one level deep, its own ``previous`` being ``null``, so the output grows
linearly with the number of releases. The oldest release has ``null``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, ValidationError

from bumpwright.core.version import infer_next_version
from bumpwright.exceptions import ReleaseDataError
from bumpwright.remote.models import (
    Forge,
    RemoteContributor,
    RemoteReleaseMetadata,
    empty_contributors,
    empty_release_metadata,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from bumpwright.config.models import BumpPolicy

logger = logging.getLogger(__name__)


@dataclass
class Commit:
    """A commit of a release, with one contributor slot per forge."""

    id: str
    message: str
    remote: dict[Forge, RemoteContributor] = field(default_factory=empty_contributors)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "message": self.message}
        for forge in Forge:
            data[forge.value] = self.remote[forge].to_dict()
        return data


@dataclass
class Release:
    """A release (git tag) or the unreleased changes on top of the last tag.

    Attributes:
        version: Version / tag name, None for unreleased changes
        commits: Commits made for the release
        commit_id: Commit the tag points to
        timestamp: Release time in seconds since the epoch
        previous_index: Index of the previous release in its history
        remote: Contributor metadata, one slot per forge
    """

    version: str | None = None
    commits: list[Commit] = field(default_factory=list)
    commit_id: str | None = None
    timestamp: int = 0
    previous_index: int | None = None
    remote: dict[Forge, RemoteReleaseMetadata] = field(default_factory=empty_release_metadata)


class _CommitRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    message: str


class _ReleaseRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version: str | None = None
    commits: list[_CommitRecord] = []
    commit_id: str | None = None
    timestamp: int = 0


class ReleaseHistory:
    """Releases of a project, newest first.

    ``releases[i].previous_index`` is ``i + 1`` for every release but the
    last one, which is the oldest known release.
    """

    def __init__(self, releases: Sequence[Release] = ()) -> None:
        self.releases: list[Release] = list(releases)
        for index, release in enumerate(self.releases):
            release.previous_index = index + 1 if index + 1 < len(self.releases) else None

    @classmethod
    def from_dicts(cls, data: Any) -> ReleaseHistory:
        """Build a history from decoded JSON (a list of releases, newest first).

        Only ``version``, ``commits`` (``id`` and ``message``), ``commit_id``
        and ``timestamp`` are read; other keys are ignored.

        Raises:
            ReleaseDataError: If the data does not describe a list of releases
        """
        if not isinstance(data, list):
            raise ReleaseDataError(f"Expected a list of releases, got {type(data).__name__}")

        try:
            records = [_ReleaseRecord.model_validate(item) for item in data]
        except ValidationError as e:
            raise ReleaseDataError(f"Invalid release data: {e}") from e

        logger.debug("Loaded %d releases", len(records))
        return cls(
            [
                Release(
                    version=record.version,
                    commits=[Commit(id=c.id, message=c.message) for c in record.commits],
                    commit_id=record.commit_id,
                    timestamp=record.timestamp,
                )
                for record in records
            ]
        )

    def __len__(self) -> int:
        return len(self.releases)

    def __iter__(self) -> Iterator[Release]:
        return iter(self.releases)

    def __getitem__(self, index: int) -> Release:
        return self.releases[index]

    def previous(self, index: int) -> Release | None:
        """Return the release before ``releases[index]``, if any."""
        previous_index = self.releases[index].previous_index
        return None if previous_index is None else self.releases[previous_index]

    def calculate_next_version(self, index: int = 0, policy: BumpPolicy | None = None) -> str:
        """Calculate the version that ``releases[index]`` should get.

        The version of the previous release is bumped according to the
        commits of ``releases[index]``. Without a previous version,
        ``0.1.0`` is returned.

        Raises:
            VersionParseError: If the previous version is not semver
        """
        release = self.releases[index]
        previous = self.previous(index)
        return infer_next_version(
            previous.version if previous else None,
            [commit.message for commit in release.commits],
            policy,
        )

    def to_dict(self, index: int) -> dict[str, Any]:
        """Serialize ``releases[index]`` with its predecessor one level deep."""
        previous = self.previous(index)
        return _release_to_dict(
            self.releases[index],
            _release_to_dict(previous, None) if previous is not None else None,
        )

    def to_list(self) -> list[dict[str, Any]]:
        return [self.to_dict(index) for index in range(len(self.releases))]

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialize all releases, newest first."""
        separators = None if indent is not None else (",", ":")
        return json.dumps(self.to_list(), indent=indent, separators=separators, ensure_ascii=False)


def _release_to_dict(release: Release, previous: dict[str, Any] | None) -> dict[str, Any]:
    data: dict[str, Any] = {
        "version": release.version,
        "commits": [commit.to_dict() for commit in release.commits],
        "commit_id": release.commit_id,
        "timestamp": release.timestamp,
        "previous": previous,
    }
    for forge in Forge:
        data[forge.value] = release.remote[forge].to_dict()
    return data
