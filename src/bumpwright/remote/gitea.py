"""Gitea REST API payloads."""

from __future__ import annotations

from pydantic import BaseModel

from bumpwright.remote.adapter import ForgeAdapter
from bumpwright.remote.models import Forge, RemoteCommit, RemotePullRequest


class GiteaCommitAuthor(BaseModel):
    """Gitea account of a commit author."""

    login: str | None = None


class GiteaCommit(BaseModel):
    """A single commit."""

    sha: str
    author: GiteaCommitAuthor | None = None

    def to_remote(self) -> RemoteCommit:
        return RemoteCommit(id=self.sha, username=self.author.login if self.author else None)


class GiteaPullRequestLabel(BaseModel):
    """Label of a pull request."""

    name: str


class GiteaPullRequest(BaseModel):
    """A single pull request."""

    number: int
    title: str | None = None
    merge_commit_sha: str | None = None
    labels: list[GiteaPullRequestLabel] = []

    def to_remote(self) -> RemotePullRequest:
        return RemotePullRequest(
            number=self.number,
            title=self.title,
            labels=tuple(label.name for label in self.labels),
            merge_commit=self.merge_commit_sha,
        )


ADAPTER = ForgeAdapter(Forge.GITEA, GiteaCommit, GiteaPullRequest)
