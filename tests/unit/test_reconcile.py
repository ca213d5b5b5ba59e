"""Tests for reconciling commits with forge data."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bumpwright.core.release import Commit, Release
from bumpwright.remote import (
    Forge,
    RemoteCommit,
    RemoteContributor,
    RemotePullRequest,
    get_adapter,
    reconcile,
    update_release_metadata,
)

if TYPE_CHECKING:
    from typing import Any

    from bumpwright.core.release import ReleaseHistory


@pytest.fixture
def remote_commits(github_commits_payload: list[dict[str, Any]]) -> list[RemoteCommit]:
    return get_adapter(Forge.GITHUB).parse_commits(github_commits_payload)


@pytest.fixture
def remote_requests(github_pulls_payload: list[dict[str, Any]]) -> list[RemotePullRequest]:
    return get_adapter(Forge.GITHUB).parse_pull_requests(github_pulls_payload)


class TestReconcile:
    """Tests for reconcile()."""

    def test_commits_annotated(
        self,
        release_commits: list[Commit],
        remote_commits: list[RemoteCommit],
        remote_requests: list[RemotePullRequest],
    ):
        """Each commit gets its username and pull request data."""
        reconcile(release_commits, remote_commits, remote_requests, Forge.GITHUB)

        assert [c.remote[Forge.GITHUB] for c in release_commits] == [
            RemoteContributor("orhun", "1", 42, ["rust"], False),
            RemoteContributor("orhun", "2", 66, ["rust"], False),
            RemoteContributor("nuhro", "3", 53, ["deps"], False),
            RemoteContributor("awesome_contributor", "4", 1000, ["deps"], False),
            RemoteContributor("orhun", "5", 999999, ["github"], False),
            RemoteContributor("someone", None, None, [], False),
        ]
        # Other forge slots are untouched
        assert all(c.remote[Forge.GITLAB] == RemoteContributor() for c in release_commits)

    def test_contributors_grouped(
        self,
        release_commits: list[Commit],
        remote_commits: list[RemoteCommit],
        remote_requests: list[RemotePullRequest],
    ):
        """One first-time contributor per username, in order of appearance."""
        metadata = reconcile(release_commits, remote_commits, remote_requests, Forge.GITHUB)

        assert metadata.contributors == [
            RemoteContributor("orhun", "1", 42, ["rust"], True),
            RemoteContributor("nuhro", "3", 53, ["deps"], True),
            RemoteContributor("awesome_contributor", "4", 1000, ["deps"], True),
            RemoteContributor("someone", None, None, [], True),
        ]

    def test_unmatched_commit(self, remote_commits: list[RemoteCommit]):
        """A commit matching nothing keeps empty fields and forms its own group."""
        commits = [
            Commit(id="1d244937ee6ceb8e0314a4a201ba93a7a61f2071", message="a"),
            Commit(id="ffffffffffffffffffffffffffffffffffffffff", message="b"),
        ]
        metadata = reconcile(commits, remote_commits, [], Forge.GITHUB)

        assert commits[1].remote[Forge.GITHUB] == RemoteContributor()
        assert [c.username for c in metadata.contributors] == ["orhun", None]
        assert metadata.contributors[1] == RemoteContributor(is_first_time=True)

    def test_commits_without_username_grouped_once(self):
        """All commits without username form a single roster entry."""
        commits = [Commit(id=sha, message="x") for sha in ("a1", "b2", "c3")]
        requests = [RemotePullRequest(number=7, title="seven", merge_commit="b2")]
        metadata = reconcile(commits, [RemoteCommit(id="a1")], requests, Forge.GITEA)

        assert metadata.contributors == [
            RemoteContributor(None, "seven", 7, [], True),
        ]

    def test_group_takes_first_commit_with_pull_request(self):
        """The roster entry uses the first commit of its group that has a pull request."""
        commits = [Commit(id=sha, message="x") for sha in ("a1", "b2", "c3")]
        remote = [RemoteCommit(id=sha, username="orhun") for sha in ("a1", "b2", "c3")]
        requests = [
            RemotePullRequest(number=2, title="two", labels=("x",), merge_commit="b2"),
            RemotePullRequest(number=3, title="three", merge_commit="c3"),
        ]
        metadata = reconcile(commits, remote, requests, Forge.GITHUB)

        assert metadata.contributors == [RemoteContributor("orhun", "two", 2, ["x"], True)]

    def test_pull_request_without_commit_match(self):
        """Pull request data is attached even without a matching remote commit."""
        commits = [Commit(id="a1", message="x")]
        requests = [RemotePullRequest(number=9, title="nine", merge_commit="a1")]
        reconcile(commits, [], requests, Forge.BITBUCKET)

        assert commits[0].remote[Forge.BITBUCKET] == RemoteContributor(None, "nine", 9, [], False)

    def test_last_duplicate_wins(self):
        """Duplicate SHAs resolve to the last entry."""
        commits = [Commit(id="a1", message="x")]
        remote = [RemoteCommit(id="a1", username="first"), RemoteCommit(id="a1", username="last")]
        requests = [
            RemotePullRequest(number=1, merge_commit="a1"),
            RemotePullRequest(number=2, merge_commit="a1"),
        ]
        reconcile(commits, remote, requests, Forge.GITHUB)

        assert commits[0].remote[Forge.GITHUB].username == "last"
        assert commits[0].remote[Forge.GITHUB].pr_number == 2

    def test_pull_requests_without_merge_commit_skipped(self):
        """Pull requests that were never merged match nothing."""
        commits = [Commit(id="", message="x")]
        requests = [RemotePullRequest(number=1, title="open", merge_commit=None)]
        reconcile(commits, [], requests, Forge.GITHUB)

        assert commits[0].remote[Forge.GITHUB] == RemoteContributor()

    def test_empty_sha_matches_only_empty_id(self, remote_commits: list[RemoteCommit]):
        """The empty SHA reported by a forge only matches a literally empty id."""
        commits = [Commit(id="6c34967147560ea09658776d4901709139b4ad66", message="x")]
        reconcile(commits, remote_commits, [], Forge.GITHUB)
        assert commits[0].remote[Forge.GITHUB].username == "someone"

        empty = [Commit(id="", message="x")]
        reconcile(empty, [RemoteCommit(id="", username="ghost")], [], Forge.GITHUB)
        assert empty[0].remote[Forge.GITHUB].username == "ghost"

    def test_case_sensitive_match(self):
        """SHAs are compared case-sensitively."""
        commits = [Commit(id="ABC123", message="x")]
        reconcile(commits, [RemoteCommit(id="abc123", username="orhun")], [], Forge.GITHUB)

        assert commits[0].remote[Forge.GITHUB].username is None

    def test_labels_copied(self):
        """Commit labels are independent copies."""
        commits = [Commit(id="a1", message="x"), Commit(id="a1", message="y")]
        requests = [RemotePullRequest(number=1, labels=("rust",), merge_commit="a1")]
        metadata = reconcile(commits, [], requests, Forge.GITHUB)

        commits[0].remote[Forge.GITHUB].pr_labels.append("mutated")
        assert commits[1].remote[Forge.GITHUB].pr_labels == ["rust"]
        assert metadata.contributors[0].pr_labels == ["rust"]

    def test_empty_commits(self, remote_commits: list[RemoteCommit]):
        """No commits yields no contributors."""
        assert reconcile([], remote_commits, [], Forge.GITHUB).contributors == []

    def test_idempotent(
        self,
        release_commits: list[Commit],
        remote_commits: list[RemoteCommit],
        remote_requests: list[RemotePullRequest],
    ):
        """Running twice yields the same annotations and metadata."""
        first = reconcile(release_commits, remote_commits, remote_requests, Forge.GITHUB)
        first_commits = [c.to_dict() for c in release_commits]

        for commit in release_commits:
            commit.remote[Forge.GITHUB] = RemoteContributor()
        second = reconcile(release_commits, remote_commits, remote_requests, Forge.GITHUB)

        assert second.to_dict() == first.to_dict()
        assert [c.to_dict() for c in release_commits] == first_commits

        third = reconcile(release_commits, remote_commits, remote_requests, Forge.GITHUB)
        assert third.to_dict() == first.to_dict()


class TestUpdateReleaseMetadata:
    """Tests for update_release_metadata()."""

    def test_stores_metadata_on_release(
        self,
        release_history: ReleaseHistory,
        remote_commits: list[RemoteCommit],
        remote_requests: list[RemotePullRequest],
    ):
        """The metadata is stored in the forge's slot of the release."""
        release = release_history[0]
        metadata = update_release_metadata(release, Forge.GITHUB, remote_commits, remote_requests)

        assert release.remote[Forge.GITHUB] is metadata
        assert len(metadata.contributors) == 4
        assert release.remote[Forge.GITLAB].contributors == []

    def test_forges_are_independent(self):
        """Reconciling two forges writes disjoint slots."""
        release = Release(commits=[Commit(id="a1", message="x")])
        update_release_metadata(release, Forge.GITHUB, [RemoteCommit("a1", "gh-user")], [])
        update_release_metadata(release, Forge.GITLAB, [RemoteCommit("a1", "GitLab User")], [])

        assert release.commits[0].remote[Forge.GITHUB].username == "gh-user"
        assert release.commits[0].remote[Forge.GITLAB].username == "GitLab User"
        assert release.remote[Forge.GITHUB].contributors[0].username == "gh-user"
        assert release.remote[Forge.GITLAB].contributors[0].username == "GitLab User"
