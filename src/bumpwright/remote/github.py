"""GitHub REST API payloads.

- commits: ``GET /repos/{owner}/{repo}/commits``
- pull requests: ``GET /repos/{owner}/{repo}/pulls?state=closed``
"""

from __future__ import annotations

from pydantic import BaseModel

from bumpwright.remote.adapter import ForgeAdapter
from bumpwright.remote.models import Forge, RemoteCommit, RemotePullRequest


class GitHubCommitAuthor(BaseModel):
    """GitHub account of a commit author."""

    login: str | None = None


class GitHubCommit(BaseModel):
    """A single commit."""

    sha: str
    author: GitHubCommitAuthor | None = None

    def to_remote(self) -> RemoteCommit:
        return RemoteCommit(id=self.sha, username=self.author.login if self.author else None)


class PullRequestLabel(BaseModel):
    """Label of a pull request."""

    name: str


class GitHubPullRequest(BaseModel):
    """A single pull request."""

    number: int
    title: str | None = None
    merge_commit_sha: str | None = None
    labels: list[PullRequestLabel] = []

    def to_remote(self) -> RemotePullRequest:
        return RemotePullRequest(
            number=self.number,
            title=self.title,
            labels=tuple(label.name for label in self.labels),
            merge_commit=self.merge_commit_sha,
        )


ADAPTER = ForgeAdapter(Forge.GITHUB, GitHubCommit, GitHubPullRequest)
