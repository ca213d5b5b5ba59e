"""Implementation of the 'bump' command.

The bump command prints the version that follows a given version once
the given commits are released.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from bumpwright.config import BumpPolicy, load_config
from bumpwright.core.version import infer_next_version
from bumpwright.exceptions import ConfigNotFoundError, VersionParseError

if TYPE_CHECKING:
    from rich.console import Console


def load_policy(
    path: str | None,
    features_always_bump_minor: bool,
    breaking_always_bump_major: bool,
    err_console: Console,
) -> BumpPolicy:
    """Load the bump policy from pyproject.toml and apply CLI overrides.

    Without a pyproject.toml the default policy is used.
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        policy = load_config(project_path).bump
    except ConfigNotFoundError:
        policy = BumpPolicy()
    except Exception as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    return policy.model_copy(
        update={
            "features_always_bump_minor": policy.features_always_bump_minor
            and features_always_bump_minor,
            "breaking_always_bump_major": policy.breaking_always_bump_major
            and breaking_always_bump_major,
        }
    )


def read_messages(messages: list[str], messages_file: str | None, err_console: Console) -> list[str]:
    """Collect commit messages from the command line and a JSON file."""
    collected = list(messages)
    if messages_file is None:
        return collected

    try:
        data = json.loads(Path(messages_file).read_text())
    except (OSError, json.JSONDecodeError) as e:
        err_console.print(f"[red]Error reading commit messages:[/] {e}")
        raise SystemExit(1) from e

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        err_console.print(
            f"[red]Error reading commit messages:[/] {messages_file} must hold a JSON list of strings"
        )
        raise SystemExit(1)

    collected.extend(data)
    return collected


def run_bump(
    current_version: str | None,
    messages: list[str],
    messages_file: str | None,
    path: str | None,
    features_always_bump_minor: bool,
    breaking_always_bump_major: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the bump command.

    Args:
        current_version: Version of the previous release, None for the first one
        messages: Commit messages given on the command line
        messages_file: JSON file holding a list of commit messages
        path: Optional path to project directory (for configuration)
        features_always_bump_minor: False to let features bump the patch before 1.0.0
        breaking_always_bump_major: False to keep breaking changes below 1.0.0
        console: Console for standard output
        err_console: Console for error output
    """
    policy = load_policy(path, features_always_bump_minor, breaking_always_bump_major, err_console)
    commit_messages = read_messages(messages, messages_file, err_console)

    try:
        next_version = infer_next_version(current_version, commit_messages, policy)
    except VersionParseError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    console.print(next_version, highlight=False, markup=False, emoji=False, soft_wrap=True)
