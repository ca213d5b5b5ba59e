"""Next version inference.

Versions are semantic versions (https://semver.org), optionally preceded
by an arbitrary prefix such as ``v``, ``foo/`` or ``tauri-v``. The prefix
is kept untouched and re-attached to the bumped version.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from semver import Version as SemVer

from bumpwright.config.models import BumpPolicy
from bumpwright.core.commits import CommitKind, classify_commits
from bumpwright.exceptions import VersionParseError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

INITIAL_VERSION = "0.1.0"


class BumpType(StrEnum):
    """Kind of version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"


@dataclass(frozen=True, slots=True)
class PrefixedVersion:
    """A semantic version with the text that preceded it in the tag."""

    prefix: str
    version: SemVer

    @classmethod
    def parse(cls, text: str) -> PrefixedVersion:
        """Parse a version string, stripping a non-semver prefix if needed.

        The string is first parsed as-is. If that fails and it has at least
        two dot-separated segments, every position where a digit follows a
        non-digit is tried as the start of the version, left to right.

        Raises:
            VersionParseError: If neither the string nor any suffix is semver
        """
        try:
            return cls("", _parse_semver(text))
        except ValueError as e:
            error = e

        if len(text.split(".")) >= 2:
            in_numeric_run = False
            for index, char in enumerate(text):
                if char.isnumeric() and not in_numeric_run:
                    in_numeric_run = True
                    try:
                        return cls(text[:index], _parse_semver(text[index:]))
                    except ValueError:
                        continue
                elif not char.isnumeric() and in_numeric_run:
                    in_numeric_run = False

        raise VersionParseError(text, f"Invalid semantic version {text!r}: {error}") from error

    def bump(self, bump_type: BumpType) -> PrefixedVersion:
        """Return a new version with the given increment applied."""
        return PrefixedVersion(self.prefix, apply_bump(self.version, bump_type))

    def __str__(self) -> str:
        return f"{self.prefix}{self.version}"


def _parse_semver(text: str) -> SemVer:
    # semver's pattern tolerates a trailing newline; tags never contain whitespace
    if text != text.strip():
        raise ValueError(f"{text!r} is not valid SemVer string")
    return SemVer.parse(text)


def _increment_prerelease(prerelease: str) -> str:
    head, dot, last = prerelease.rpartition(".")
    if dot and last.isascii() and last.isdigit():
        return f"{head}.{int(last) + 1}"
    return f"{prerelease}.1"


def apply_bump(version: SemVer, bump_type: BumpType) -> SemVer:
    """Increment a semantic version.

    Major, minor and patch increments drop pre-release and build metadata.
    A pre-release increment bumps the last numeric identifier
    (``alpha.1`` -> ``alpha.2``) or appends ``.1``, keeping build metadata.
    """
    if bump_type is BumpType.MAJOR:
        return version.bump_major()
    if bump_type is BumpType.MINOR:
        return version.bump_minor()
    if bump_type is BumpType.PATCH:
        return version.bump_patch()
    return version.replace(prerelease=_increment_prerelease(version.prerelease or ""))


def calculate_bump(
    commit_messages: Iterable[str],
    current: SemVer,
    policy: BumpPolicy,
) -> BumpType:
    """Determine the version increment for a set of commits.

    Breaking changes take precedence over features, features over
    anything else. While the major version is 0, the policy decides
    whether breaking changes and features may promote the version:

    - a breaking change that may not bump the major version counts
      as a feature;
    - a feature that may not bump the minor version bumps the patch.

    A pre-release version only ever gets its pre-release counter bumped.

    Args:
        commit_messages: Commit messages of the release
        current: Version of the previous release
        policy: Bump policy

    Returns:
        The increment to apply
    """
    if current.prerelease:
        return BumpType.PRERELEASE

    kinds = set(classify_commits(message.rstrip() for message in commit_messages))
    is_stable = current.major > 0

    if CommitKind.BREAKING in kinds and (is_stable or policy.breaking_always_bump_major):
        return BumpType.MAJOR

    if kinds & {CommitKind.BREAKING, CommitKind.FEATURE}:
        if is_stable or policy.features_always_bump_minor:
            return BumpType.MINOR

    return BumpType.PATCH


def infer_next_version(
    current_version: str | None,
    commit_messages: Iterable[str],
    policy: BumpPolicy | None = None,
) -> str:
    """Compute the next version from the previous one and the new commits.

    Args:
        current_version: Version of the previous release, None if there is none
        commit_messages: Messages of the commits in the new release
        policy: Bump policy (defaults to ``BumpPolicy()``)

    Returns:
        The next version, with the original prefix preserved. ``"0.1.0"``
        when there is no previous version.

    Raises:
        VersionParseError: If ``current_version`` is not a semantic version,
            with or without a prefix
    """
    if current_version is None:
        logger.warning("No releases found, using %s as the next version.", INITIAL_VERSION)
        return INITIAL_VERSION

    policy = policy or BumpPolicy()
    current = PrefixedVersion.parse(current_version)
    bump_type = calculate_bump(commit_messages, current.version, policy)
    next_version = current.bump(bump_type)

    logger.debug("Bumping %s (%s): %s -> %s", bump_type, current_version, current, next_version)
    return str(next_version)
