"""Pydantic settings models for action inputs.

GitHub Actions exports each ``with:`` input as an ``INPUT_<NAME>``
environment variable, keeping hyphens from the input name. The runner
itself provides ``GITHUB_*`` variables describing the repository.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from semver_action.core.version import Version

DEFAULT_API_URL = "https://api.github.com"


class ActionInputs(BaseSettings):
    """Inputs of the semantic versioning action."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    token: str = Field(
        validation_alias="INPUT_TOKEN",
        min_length=1,
        description="Token used to push tags and create releases",
    )
    default_version: str = Field(
        default="v0.1.0",
        validation_alias="INPUT_DEFAULT-VERSION",
        description="Version used when the repository has no version tag yet",
    )
    tag_prefix: str = Field(
        default="v",
        validation_alias="INPUT_TAG-PREFIX",
        description="Prefix used to list existing version tags",
    )
    create_release: bool = Field(default=False, validation_alias="INPUT_CREATE-RELEASE")
    release_draft: bool = Field(default=False, validation_alias="INPUT_RELEASE-DRAFT")
    release_prerelease: bool = Field(default=False, validation_alias="INPUT_RELEASE-PRERELEASE")
    bump_patch_on_unknown: bool = Field(
        default=False,
        validation_alias="INPUT_BUMP-PATCH-ON-UNKNOWN",
        description="Bump patch for commits with unrecognized or missing types",
    )
    dry_run: bool = Field(default=False, validation_alias="INPUT_DRY-RUN")

    @field_validator(
        "create_release",
        "release_draft",
        "release_prerelease",
        "bump_patch_on_unknown",
        "dry_run",
        mode="before",
    )
    @classmethod
    def _parse_flag(cls, value: Any) -> bool:
        # Only a case-insensitive "true" enables a flag
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"

    @field_validator("default_version")
    @classmethod
    def _validate_default_version(cls, value: str) -> str:
        Version.parse(value)
        return value

    @property
    def initial_version(self) -> Version:
        return Version.parse(self.default_version)


class GitHubSettings(BaseSettings):
    """Repository context provided by the GitHub Actions runner."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    repository: str = Field(default="", validation_alias="GITHUB_REPOSITORY")
    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="GITHUB_API_URL")
    output_file: Path | None = Field(default=None, validation_alias="GITHUB_OUTPUT")
