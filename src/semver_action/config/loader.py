"""Loading action inputs from the environment."""

from __future__ import annotations

from pydantic import ValidationError

from semver_action.config.models import ActionInputs, GitHubSettings
from semver_action.exceptions import ConfigValidationError


def _format_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "input"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def load_inputs() -> ActionInputs:
    """Load and validate action inputs from INPUT_* environment variables.

    Returns:
        Validated ActionInputs

    Raises:
        ConfigValidationError: If a required input is missing or invalid
    """
    try:
        return ActionInputs()  # type: ignore[call-arg]
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid action inputs: {_format_errors(e)}") from e


def load_github_settings() -> GitHubSettings:
    """Load repository context from GITHUB_* environment variables.

    Raises:
        ConfigValidationError: If a variable has an invalid value
    """
    try:
        return GitHubSettings()
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid runner environment: {_format_errors(e)}") from e
