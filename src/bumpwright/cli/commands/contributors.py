"""Implementation of the 'contributors' command.

The contributors command joins the commits of a release with the raw
commit and pull request lists fetched from a forge API, and prints the
resulting releases as JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bumpwright.cli.commands.bump import load_policy
from bumpwright.core.release import ReleaseHistory
from bumpwright.exceptions import BumpwrightError
from bumpwright.remote import Forge, get_adapter, update_release_metadata

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


def _read_json(file_path: str, what: str, err_console: Console) -> Any:
    try:
        return json.loads(Path(file_path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        err_console.print(f"[red]Error reading {what}:[/] {e}")
        raise SystemExit(1) from e


def run_contributors(
    releases_file: str,
    forge: Forge,
    commits_file: str,
    pulls_file: str | None,
    index: int,
    bump: bool,
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the contributors command.

    Args:
        releases_file: JSON file with the releases, newest first
        forge: Forge the API payloads come from
        commits_file: JSON file with the forge's commit list
        pulls_file: JSON file with the forge's pull/merge request list
        index: Index of the release to annotate
        bump: Set the release version to the next version if it has none
        path: Optional path to project directory (for configuration)
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        history = ReleaseHistory.from_dicts(_read_json(releases_file, "releases", err_console))
    except BumpwrightError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if not 0 <= index < len(history):
        err_console.print(f"[red]Error:[/] No release at index {index} ({len(history)} releases)")
        raise SystemExit(1)

    adapter = get_adapter(forge)
    try:
        remote_commits = adapter.parse_commits(_read_json(commits_file, "commits", err_console))
        remote_requests = (
            adapter.parse_pull_requests(_read_json(pulls_file, "pull requests", err_console))
            if pulls_file
            else []
        )
    except BumpwrightError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    release = history[index]
    metadata = update_release_metadata(release, forge, remote_commits, remote_requests)
    logger.info(
        "Found %d contributors for %s on %s",
        len(metadata.contributors),
        release.version or "unreleased changes",
        forge,
    )

    if bump and release.version is None:
        policy = load_policy(path, True, True, err_console)
        try:
            release.version = history.calculate_next_version(index, policy)
        except BumpwrightError as e:
            err_console.print(f"[red]Error:[/] {e}")
            raise SystemExit(1) from e

    console.print(history.to_json(), highlight=False, markup=False, emoji=False, soft_wrap=True)
