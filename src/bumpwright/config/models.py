"""Configuration models.

Settings live in the ``[tool.bumpwright]`` table of ``pyproject.toml``
and are validated with pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BumpPolicy(BaseModel):
    """How commits translate into a version bump.

    Attributes:
        features_always_bump_minor: ``feat`` commits bump the minor version
            even before 1.0.0. When false, they only bump the patch version
            while the major version is 0.
        breaking_always_bump_major: Breaking changes bump the major version
            even before 1.0.0. When false, a 0.x version is never promoted
            to 1.0.0 by a breaking change.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    features_always_bump_minor: bool = True
    breaking_always_bump_major: bool = True


class BumpwrightConfig(BaseModel):
    """Root configuration (``[tool.bumpwright]``)."""

    model_config = ConfigDict(extra="forbid")

    bump: BumpPolicy = Field(default_factory=BumpPolicy)
