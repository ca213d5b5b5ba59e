"""Joining local commits with forge data.

Commits are matched by their full SHA against the commits and the merge
commits of pull requests reported by a forge. The same logic serves every
forge; only the slot written on commits and releases differs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bumpwright.remote.models import RemoteContributor, RemoteReleaseMetadata

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableSequence

    from bumpwright.core.release import Commit, Release
    from bumpwright.remote.models import Forge, RemoteCommit, RemotePullRequest

logger = logging.getLogger(__name__)


def reconcile(
    commits: MutableSequence[Commit],
    remote_commits: Iterable[RemoteCommit],
    remote_requests: Iterable[RemotePullRequest],
    forge: Forge,
) -> RemoteReleaseMetadata:
    """Annotate commits with forge data and build the release's contributors.

    For every commit, in order, ``commit.remote[forge]`` is replaced with
    the username of the matching remote commit and the title, number and
    labels of the pull request merged by it. Missing matches leave the
    corresponding fields empty.

    The returned contributors hold one entry per distinct username, in
    order of first appearance, commits without a username forming a single
    group. Each entry carries the pull request data of the first commit of
    its group that has any, and is flagged as first-time. Telling returning
    contributors apart across releases is up to the caller.

    Remote entries that match no commit are ignored; nothing here raises.

    Args:
        commits: Commits of the release, modified in place
        remote_commits: Commits reported by the forge
        remote_requests: Pull/merge requests reported by the forge
        forge: Forge the data comes from

    Returns:
        Contributor metadata for the release
    """
    commits_by_sha = {remote_commit.id: remote_commit for remote_commit in remote_commits}
    requests_by_sha = {
        request.merge_commit: request
        for request in remote_requests
        if request.merge_commit is not None
    }

    contributors: dict[str | None, RemoteContributor] = {}
    for commit in commits:
        remote_commit = commits_by_sha.get(commit.id)
        request = requests_by_sha.get(commit.id)

        contributor = RemoteContributor(username=remote_commit.username if remote_commit else None)
        if request is not None:
            contributor.pr_title = request.title
            contributor.pr_number = request.number
            contributor.pr_labels = list(request.labels)
        commit.remote[forge] = contributor

        entry = contributors.get(contributor.username)
        if entry is None:
            contributors[contributor.username] = RemoteContributor(
                username=contributor.username,
                is_first_time=True,
            )
            entry = contributors[contributor.username]
        if not entry.has_pull_request and contributor.has_pull_request:
            entry.pr_title = contributor.pr_title
            entry.pr_number = contributor.pr_number
            entry.pr_labels = list(contributor.pr_labels)

    logger.debug(
        "%s: %d commits, %d contributors",
        forge,
        len(commits),
        len(contributors),
    )
    return RemoteReleaseMetadata(contributors=list(contributors.values()))


def update_release_metadata(
    release: Release,
    forge: Forge,
    remote_commits: Iterable[RemoteCommit],
    remote_requests: Iterable[RemotePullRequest],
) -> RemoteReleaseMetadata:
    """Reconcile a release with forge data and store the result on it."""
    metadata = reconcile(release.commits, remote_commits, remote_requests, forge)
    release.remote[forge] = metadata
    return metadata
