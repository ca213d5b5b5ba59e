"""GitLab REST API payloads.

- commits: ``GET /projects/{id}/repository/commits``
- merge requests: ``GET /projects/{id}/merge_requests?state=merged``

GitLab does not report the account of a commit author, so the author
name is used as the username.
"""

from __future__ import annotations

from pydantic import BaseModel

from bumpwright.remote.adapter import ForgeAdapter
from bumpwright.remote.models import Forge, RemoteCommit, RemotePullRequest


class GitLabCommit(BaseModel):
    """A single commit."""

    id: str
    author_name: str

    def to_remote(self) -> RemoteCommit:
        return RemoteCommit(id=self.id, username=self.author_name)


class GitLabMergeRequest(BaseModel):
    """A single merge request."""

    # iid is the project-scoped number shown in the UI (!42)
    iid: int
    title: str
    merge_commit_sha: str | None = None
    labels: list[str] = []

    def to_remote(self) -> RemotePullRequest:
        return RemotePullRequest(
            number=self.iid,
            title=self.title,
            labels=tuple(self.labels),
            merge_commit=self.merge_commit_sha,
        )


ADAPTER = ForgeAdapter(Forge.GITLAB, GitLabCommit, GitLabMergeRequest)
