"""Bitbucket Cloud REST API payloads.

Bitbucket wraps list results in pages (``{"values": [...], "next": ...}``),
which the adapter unwraps. Pull requests carry no labels.
"""

from __future__ import annotations

from pydantic import BaseModel

from bumpwright.remote.adapter import ForgeAdapter
from bumpwright.remote.models import Forge, RemoteCommit, RemotePullRequest


class BitbucketCommitAuthor(BaseModel):
    """Author of a commit, as the raw ``Name <email>`` string."""

    raw: str | None = None


class BitbucketCommit(BaseModel):
    """A single commit."""

    hash: str
    author: BitbucketCommitAuthor | None = None

    def to_remote(self) -> RemoteCommit:
        return RemoteCommit(id=self.hash, username=self.author.raw if self.author else None)


class BitbucketMergeCommit(BaseModel):
    """Merge commit of a pull request."""

    hash: str


class BitbucketPullRequest(BaseModel):
    """A single pull request."""

    id: int
    title: str | None = None
    merge_commit: BitbucketMergeCommit | None = None

    def to_remote(self) -> RemotePullRequest:
        return RemotePullRequest(
            number=self.id,
            title=self.title,
            merge_commit=self.merge_commit.hash if self.merge_commit else None,
        )


ADAPTER = ForgeAdapter(Forge.BITBUCKET, BitbucketCommit, BitbucketPullRequest)
