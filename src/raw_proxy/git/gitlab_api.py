"""GitLab project-listing API client."""

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from raw_proxy.core.exceptions import CredentialConfigError, ProviderUnavailable
from raw_proxy.core.models.directory import RepoDirectoryEntry

logger = structlog.get_logger(__name__)

PROJECTS_ENDPOINT = "/api/v4/projects"

_entries_adapter = TypeAdapter(list[RepoDirectoryEntry])


class GitLabProjectsClient:
    """Lists the projects owned by the configured GitLab token.

    Only the first page is read: the listing is scoped to ``owned=true``
    and never paginated.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        token: str | None,
        per_page: int = 100,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._per_page = per_page

    async def list_owned_projects(self) -> list[RepoDirectoryEntry]:
        """Fetch one page of owned projects."""
        if not self._token:
            raise CredentialConfigError("GitLab token is not configured")

        url = f"{self._base_url}{PROJECTS_ENDPOINT}"
        params = {"owned": "true", "simple": "true", "per_page": str(self._per_page)}

        try:
            response = await self._client.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {self._token}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "GitLab project listing rejected",
                status_code=e.response.status_code,
            )
            raise ProviderUnavailable(
                f"GitLab project listing returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("GitLab project listing failed", error=str(e))
            raise ProviderUnavailable(f"GitLab project listing failed: {e}") from e

        try:
            projects = _entries_adapter.validate_json(response.content)
        except ValidationError as e:
            logger.warning("GitLab project listing undecodable", errors=e.error_count())
            raise ProviderUnavailable("GitLab project listing is not decodable") from e

        logger.debug("GitLab projects listed", count=len(projects))
        return projects
