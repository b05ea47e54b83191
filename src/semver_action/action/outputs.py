"""GitHub Actions step outputs.

Outputs are appended to the file named by GITHUB_OUTPUT. Multi-line values
use the heredoc form with a random delimiter.
"""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console

from semver_action.core.version import BumpType
from semver_action.exceptions import OutputError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class ReleaseOutputs:
    """Values published by a release run."""

    previous_version: str
    new_version: str
    bump_type: BumpType
    changelog: str
    skipped: bool

    @classmethod
    def skipped_result(cls, previous_version: str) -> ReleaseOutputs:
        """Outputs for a run that produced no release."""
        return cls(
            previous_version=previous_version,
            new_version="",
            bump_type=BumpType.NONE,
            changelog="",
            skipped=True,
        )

    def as_dict(self) -> dict[str, str]:
        return {
            "previous-version": self.previous_version,
            "new-version": self.new_version,
            "bump-type": str(self.bump_type),
            "changelog": self.changelog,
            "skipped": "true" if self.skipped else "false",
        }


def _random_delimiter() -> str:
    return f"EOF_{secrets.token_hex(16)}"


def format_output(name: str, value: str) -> str:
    """Render one output entry in the GITHUB_OUTPUT file syntax."""
    if "\n" in value:
        delimiter = _random_delimiter()
        return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    return f"{name}={value}\n"


def set_output(
    name: str,
    value: str,
    *,
    output_file: Path | None = None,
    console: Console | None = None,
) -> None:
    """Write a single step output.

    Without an output file (e.g. running locally) the output is printed
    using the legacy workflow command syntax instead.

    Raises:
        OutputError: If the output file cannot be written
    """
    if output_file is None:
        console = console or Console()
        console.print(f"::set-output name={name}::{value}", markup=False, highlight=False)
        return

    try:
        with output_file.open("a", encoding="utf-8") as f:
            f.write(format_output(name, value))
    except OSError as e:
        raise OutputError(f"Failed to write output {name!r} to {output_file}: {e}") from e


def write_outputs(
    outputs: ReleaseOutputs | Mapping[str, str],
    *,
    output_file: Path | None = None,
    console: Console | None = None,
) -> None:
    """Write several outputs in order."""
    items = outputs.as_dict() if isinstance(outputs, ReleaseOutputs) else outputs
    for name, value in items.items():
        set_output(name, value, output_file=output_file, console=console)
