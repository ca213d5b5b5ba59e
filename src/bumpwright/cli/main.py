"""Command line interface for bumpwright."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from bumpwright import __version__
from bumpwright.remote import Forge

app = typer.Typer(
    name="bumpwright",
    help="Infer the next semantic version and collect release contributors.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"bumpwright {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """bumpwright command line."""
    _setup_logging(verbose)


@app.command()
def bump(
    current_version: Annotated[
        str | None,
        typer.Argument(help="Version of the previous release (omit for the first release)."),
    ] = None,
    message: Annotated[
        list[str] | None,
        typer.Option("--message", "-m", help="Commit message (repeatable)."),
    ] = None,
    messages_file: Annotated[
        str | None,
        typer.Option("--messages-file", help="JSON file with a list of commit messages."),
    ] = None,
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Project directory.")
    ] = None,
    no_features_always_bump_minor: Annotated[
        bool,
        typer.Option(
            "--no-features-always-bump-minor",
            help="Before 1.0.0, bump the patch version for features.",
        ),
    ] = False,
    no_breaking_always_bump_major: Annotated[
        bool,
        typer.Option(
            "--no-breaking-always-bump-major",
            help="Before 1.0.0, never bump to 1.0.0 for breaking changes.",
        ),
    ] = False,
) -> None:
    """Print the next version for the given commits."""
    from bumpwright.cli.commands.bump import run_bump

    run_bump(
        current_version=current_version,
        messages=message or [],
        messages_file=messages_file,
        path=path,
        features_always_bump_minor=not no_features_always_bump_minor,
        breaking_always_bump_major=not no_breaking_always_bump_major,
        console=console,
        err_console=err_console,
    )


@app.command()
def contributors(
    releases_file: Annotated[
        str, typer.Argument(help="JSON file with the releases, newest first.")
    ],
    forge: Annotated[Forge, typer.Option("--forge", "-f", help="Forge of the payloads.")],
    commits_file: Annotated[
        str, typer.Option("--commits", help="JSON file with the forge's commits.")
    ],
    pulls_file: Annotated[
        str | None,
        typer.Option("--pulls", help="JSON file with the forge's pull/merge requests."),
    ] = None,
    index: Annotated[int, typer.Option("--index", "-i", help="Release to annotate.")] = 0,
    bump: Annotated[
        bool, typer.Option("--bump", help="Fill in the next version of an unreleased release.")
    ] = False,
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Project directory.")
    ] = None,
) -> None:
    """Annotate a release with forge contributors and print the releases as JSON."""
    from bumpwright.cli.commands.contributors import run_contributors

    run_contributors(
        releases_file=releases_file,
        forge=forge,
        commits_file=commits_file,
        pulls_file=pulls_file,
        index=index,
        bump=bump,
        path=path,
        console=console,
        err_console=err_console,
    )
