"""Raw-file proxy service."""

from collections.abc import Iterable

import httpx
import structlog

from raw_proxy.core.exceptions import UpstreamFetchError
from raw_proxy.core.models.backend import BackendTarget
from raw_proxy.git.credentials import CredentialInjector
from raw_proxy.git.path_matcher import match_path
from raw_proxy.git.url_resolver import build_url
from raw_proxy.services.resolution import GitLabResolver
from raw_proxy.utils.formatting import handle_format

logger = structlog.get_logger(__name__)

TOKEN_PARAM = "token"
FORMAT_PARAM = "type"


def is_verified(query: Iterable[tuple[str, str]], secret: str | None) -> bool:
    """Check whether the query carries the shared secret.

    The ``token`` key is compared case-insensitively, its value exactly.
    Without a configured secret no request is verified.
    """
    if not secret:
        return False
    return any(key.lower() == TOKEN_PARAM and value == secret for key, value in query)


def format_type_from(query: Iterable[tuple[str, str]]) -> str | None:
    for key, value in query:
        if key.lower() == FORMAT_PARAM:
            return value
    return None


class RawProxyService:
    """Fetches raw files from the configured backend.

    Each request runs as one linear sequence: match the path, resolve the
    upstream URL, attach credentials when verified, fetch once, format.
    """

    def __init__(
        self,
        target: BackendTarget,
        client: httpx.AsyncClient,
        injector: CredentialInjector,
        resolver: GitLabResolver | None = None,
        secret: str | None = None,
    ) -> None:
        self._target = target
        self._client = client
        self._injector = injector
        self._resolver = resolver
        self._secret = secret

    @property
    def target(self) -> BackendTarget:
        return self._target

    async def upstream_url(self, path: str) -> str:
        """Translate an inbound path into the upstream URL."""
        matched = match_path(path, self._target.kind)
        return await build_url(self._target, matched, self._resolver)

    async def fetch(self, path: str, query: Iterable[tuple[str, str]] = ()) -> str:
        """Proxy ``path`` and return the (optionally formatted) body."""
        query = list(query)
        verified = is_verified(query, self._secret)

        url = await self.upstream_url(path)
        auth = self._injector.auth_for(self._target, verified)

        logger.info(
            "Fetching upstream file",
            backend=self._target.kind.value,
            path=path,
            verified=verified,
        )
        body = await self._get(url, auth)
        return handle_format(body, format_type_from(query))

    async def _get(self, url: str, auth: httpx.Auth | None) -> str:
        backend = self._target.kind.display_name
        try:
            response = await self._client.get(url, auth=auth)
        except httpx.HTTPError as e:
            logger.warning("Upstream fetch failed", backend=backend, error=str(e))
            raise UpstreamFetchError(f"Upstream fetch failed: {e}", backend=backend) from e

        if response.is_error:
            logger.warning(
                "Upstream returned an error status",
                backend=backend,
                status_code=response.status_code,
            )

        encoding = response.charset_encoding or "utf-8"
        try:
            return response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning("Upstream body undecodable", backend=backend, encoding=encoding)
            raise UpstreamFetchError("Upstream body is not text", backend=backend) from e
