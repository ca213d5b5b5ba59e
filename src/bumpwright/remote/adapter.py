"""Conversion of raw forge API payloads.

Each forge declares pydantic models for the commit and pull request
payloads of its REST API. The models expose ``to_remote()``, which turns
them into the forge-agnostic :class:`RemoteCommit` and
:class:`RemotePullRequest`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from bumpwright.exceptions import RemotePayloadError
from bumpwright.remote.models import Forge, RemoteCommit, RemotePullRequest

C = TypeVar("C", bound=BaseModel)
P = TypeVar("P", bound=BaseModel)


@dataclass(frozen=True)
class ForgeAdapter(Generic[C, P]):
    """Payload models of one forge."""

    forge: Forge
    commit_model: type[C]
    pull_request_model: type[P]

    def parse_commits(self, payload: Any) -> list[RemoteCommit]:
        """Convert a decoded commit list (or page) into remote commits.

        Raises:
            RemotePayloadError: If the payload does not match the forge API
        """
        return [entry.to_remote() for entry in self._validate(self.commit_model, payload)]

    def parse_pull_requests(self, payload: Any) -> list[RemotePullRequest]:
        """Convert a decoded pull request list (or page) into remote pull requests.

        Raises:
            RemotePayloadError: If the payload does not match the forge API
        """
        return [entry.to_remote() for entry in self._validate(self.pull_request_model, payload)]

    def _validate(self, model: type[BaseModel], payload: Any) -> list[Any]:
        # Paginated APIs (Bitbucket) wrap entries in {"values": [...]}
        if isinstance(payload, dict) and "values" in payload:
            payload = payload["values"]

        try:
            return TypeAdapter(list[model]).validate_python(payload)  # type: ignore[valid-type]
        except ValidationError as e:
            raise RemotePayloadError(
                f"Invalid {model.__name__} payload: {e.error_count()} error(s)\n{e}",
                forge=self.forge,
            ) from e
