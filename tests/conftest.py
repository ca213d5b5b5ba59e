"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from bumpwright.core.release import Commit, Release, ReleaseHistory

if TYPE_CHECKING:
    from pathlib import Path

COMMIT_SHAS = [
    "1d244937ee6ceb8e0314a4a201ba93a7a61f2071",
    "21f6aa587fcb772de13f2fde0e92697c51f84162",
    "35d8c6b6329ecbcf131d7df02f93c3bbc5ba5973",
    "4d3ffe4753b923f4d7807c490e650e6624a12074",
    "5a55e92e5a62dc5bf9872ffb2566959fad98bd05",
    "6c34967147560ea09658776d4901709139b4ad66",
]

COMMIT_MESSAGES = [
    "add github integration",
    "fix github integration",
    "update metadata",
    "do some stuff",
    "alright",
    "should be fine",
]


@pytest.fixture
def release_commits() -> list[Commit]:
    """Six commits of an unreleased release."""
    return [Commit(id=sha, message=msg) for sha, msg in zip(COMMIT_SHAS, COMMIT_MESSAGES, strict=True)]


@pytest.fixture
def release_history(release_commits: list[Commit]) -> ReleaseHistory:
    """Unreleased changes on top of 1.0.0."""
    return ReleaseHistory(
        [
            Release(version=None, commits=release_commits, timestamp=0),
            Release(version="1.0.0", commits=[], commit_id="a" * 40, timestamp=1700000000),
        ]
    )


@pytest.fixture
def github_commits_payload() -> list[dict[str, Any]]:
    """Raw GitHub commit list, including entries matching no local commit."""
    logins = ["orhun", "orhun", "nuhro", "awesome_contributor", "orhun", "someone"]
    payload: list[dict[str, Any]] = [
        {"sha": sha, "author": {"login": login}, "html_url": "https://github.com/x/y"}
        for sha, login in zip(COMMIT_SHAS, logins, strict=True)
    ]
    payload.extend(
        [
            {"sha": "0c34967147560e809658776d4901709139b4ad68", "author": {"login": "idk"}},
            {"sha": "kk34967147560e809658776d4901709139b4ad68", "author": None},
            {"sha": "", "author": None},
        ]
    )
    return payload


@pytest.fixture
def github_pulls_payload() -> list[dict[str, Any]]:
    """Raw GitHub pull request list merging the first five commits."""
    return [
        {
            "number": number,
            "title": title,
            "merge_commit_sha": sha,
            "labels": [{"name": label}],
            "state": "closed",
        }
        for sha, title, number, label in [
            (COMMIT_SHAS[0], "1", 42, "rust"),
            (COMMIT_SHAS[1], "2", 66, "rust"),
            (COMMIT_SHAS[2], "3", 53, "deps"),
            (COMMIT_SHAS[3], "4", 1000, "deps"),
            (COMMIT_SHAS[4], "5", 999999, "github"),
        ]
    ]


@pytest.fixture
def temp_project_with_pyproject(tmp_path: Path) -> Path:
    """Create a project directory with a bumpwright configuration."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "0.3.0"

[tool.bumpwright.bump]
features_always_bump_minor = false
breaking_always_bump_major = false
"""
    )
    return tmp_path
