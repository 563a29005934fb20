"""
TMDB adapter - The Movie Database v3 API client.

Provides:
- Popular movies
- Movie search by title
- Movie details by TMDB id

The API key is only ever used server-side; clients go through /movies/*.
Returns the raw TMDB JSON; mapping to response schemas happens in
MovieService.
"""

from typing import Any, Optional

import httpx

from cinefeel.config.settings import Settings, get_settings
from cinefeel.shared.core.exceptions import (
    ExternalServiceError,
    MovieNotFoundError,
    ServiceUnavailableError,
)
from cinefeel.shared.core.logging import get_logger


logger = get_logger(__name__)


class TMDBAdapter:
    """
    Adapter for TMDB API operations.

    Handles:
    - Authentication (api_key query parameter)
    - Language selection
    - Mapping HTTP failures to application errors
    """

    SERVICE_NAME = "TMDB"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize TMDB adapter.

        Args:
            settings: Settings to read the key, base URL and timeout from
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.settings = settings or get_settings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.TMDB_BASE_URL,
            timeout=self.settings.TMDB_TIMEOUT_SECONDS,
            transport=self._transport,
        )

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        GET a TMDB endpoint and return the decoded JSON body.

        Raises:
            ServiceUnavailableError: If no API key is configured
            httpx.HTTPStatusError: On a non-2xx response
            ExternalServiceError: On transport failures or a body that is not JSON
        """
        if not self.settings.TMDB_API_KEY:
            raise ServiceUnavailableError("Movie catalog is not configured")

        query = {
            "api_key": self.settings.TMDB_API_KEY,
            "language": self.settings.TMDB_LANGUAGE,
            **(params or {}),
        }

        try:
            async with self._client() as client:
                response = await client.get(path, params=query)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            logger.warning("TMDB request timed out", path=path)
            raise ExternalServiceError(self.SERVICE_NAME, "Movie catalog timed out") from e
        except httpx.RequestError as e:
            logger.warning("TMDB request failed", path=path, error=str(e))
            raise ExternalServiceError(self.SERVICE_NAME) from e
        except ValueError as e:
            logger.warning("TMDB returned a non-JSON body", path=path)
            raise ExternalServiceError(self.SERVICE_NAME, "Movie catalog sent an unreadable response") from e

    def _status_error(self, error: httpx.HTTPStatusError) -> ExternalServiceError:
        status_code = error.response.status_code
        logger.warning(
            "TMDB returned an error",
            status_code=status_code,
            path=error.request.url.path,
        )
        return ExternalServiceError(
            self.SERVICE_NAME,
            details={"status_code": status_code},
        )

    async def popular(self, page: int = 1) -> dict[str, Any]:
        """Get a page of popular movies."""
        try:
            return await self._get("/movie/popular", {"page": page})
        except httpx.HTTPStatusError as e:
            raise self._status_error(e) from e

    async def search(self, query: str, page: int = 1) -> dict[str, Any]:
        """
        Search movies by title.

        Args:
            query: Free-text title query
            page: 1-indexed result page
        """
        try:
            return await self._get("/search/movie", {"query": query, "page": page})
        except httpx.HTTPStatusError as e:
            raise self._status_error(e) from e

    async def movie_details(self, tmdb_id: int) -> dict[str, Any]:
        """
        Get details for one movie.

        Raises:
            MovieNotFoundError: If TMDB has no movie with this id
        """
        try:
            return await self._get(f"/movie/{tmdb_id}")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise MovieNotFoundError(tmdb_id) from e
            raise self._status_error(e) from e
