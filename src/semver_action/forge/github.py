"""GitHub releases REST client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from semver_action.config.models import DEFAULT_API_URL
from semver_action.exceptions import ConfigValidationError, GitHubAPIError

if TYPE_CHECKING:
    from types import TracebackType

API_VERSION = "2022-11-28"
DEFAULT_TIMEOUT = 30.0


class GitHubClient:
    """Minimal GitHub API client for creating releases.

    Args:
        token: Token with contents:write permission
        repository: Repository in "owner/repo" form
        api_url: API base URL
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        token: str,
        repository: str,
        api_url: str = DEFAULT_API_URL,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not repository:
            raise ConfigValidationError(
                "GitHub repository is not set. Expected GITHUB_REPOSITORY as 'owner/repo'."
            )
        self.repository = repository
        self.api_url = api_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.api_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            },
            timeout=timeout,
            transport=transport,
        )

    def create_release(
        self,
        tag_name: str,
        name: str,
        body: str,
        *,
        draft: bool = False,
        prerelease: bool = False,
    ) -> dict[str, Any]:
        """Create a release for an existing tag.

        Args:
            tag_name: Tag the release points at
            name: Release title
            body: Release notes (markdown)
            draft: Create as draft
            prerelease: Mark as pre-release

        Returns:
            The created release as returned by the API

        Raises:
            GitHubAPIError: If the request fails or is rejected
        """
        payload = {
            "tag_name": tag_name,
            "name": name,
            "body": body,
            "draft": draft,
            "prerelease": prerelease,
        }

        try:
            response = self._client.post(f"/repos/{self.repository}/releases", json=payload)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"Failed to reach GitHub API: {e}") from e

        if response.status_code >= 300:
            raise GitHubAPIError(
                f"Create release failed (HTTP {response.status_code}): {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        return response.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
