"""Conventional commit classification.

Only what version inference needs is extracted from a message:
whether it announces a breaking change, a feature, or anything else.
Messages that do not follow the conventional commit format are
classified as ``OTHER``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# type(scope)!: description
CONVENTIONAL_PATTERN = re.compile(
    r"^(?P<type>[A-Za-z][\w-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<breaking>!)?"
    r":[ \t]+(?P<description>\S.*)$"
)

# Footer token, only honoured after the header line
BREAKING_FOOTER_PATTERN = re.compile(r"^BREAKING[ -]CHANGE:", re.MULTILINE)

FEATURE_TYPE = "feat"


class CommitKind(StrEnum):
    """Effect of a commit on the next version."""

    BREAKING = "breaking"
    FEATURE = "feature"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class CommitHeader:
    """Parsed conventional commit header."""

    commit_type: str
    scope: str | None
    description: str
    is_breaking: bool


def parse_header(message: str) -> CommitHeader | None:
    """Parse the first line of a commit message.

    Returns:
        The parsed header, or None if the message is not a conventional commit
    """
    header, _, body = message.partition("\n")
    match = CONVENTIONAL_PATTERN.match(header.rstrip("\r"))
    if not match:
        return None

    is_breaking = bool(match.group("breaking")) or bool(BREAKING_FOOTER_PATTERN.search(body))
    return CommitHeader(
        commit_type=match.group("type").lower(),
        scope=match.group("scope") or None,
        description=match.group("description").strip(),
        is_breaking=is_breaking,
    )


def classify_commit(message: str) -> CommitKind:
    """Classify a commit message.

    Trailing whitespace and newlines are ignored, so ``"feat!: x\\n"`` and
    ``"feat!: x"`` classify identically.
    """
    header = parse_header(message.rstrip())
    if header is None:
        return CommitKind.OTHER
    if header.is_breaking:
        return CommitKind.BREAKING
    if header.commit_type == FEATURE_TYPE:
        return CommitKind.FEATURE
    return CommitKind.OTHER


def classify_commits(messages: Iterable[str]) -> list[CommitKind]:
    """Classify several commit messages, preserving order."""
    return [classify_commit(message) for message in messages]
