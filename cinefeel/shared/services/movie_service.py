"""
Movie Service

Maps TMDB payloads to the API's movie schemas.

TMDB returns relative image paths ("/f89U3ADr1oiB1s9GkdPOE.jpg"); this
service turns them into absolute URLs under TMDB_IMAGE_BASE_URL so the
client can bookmark a movie with the poster URL it was shown.

Usage:
======
    from cinefeel.shared.services.movie_service import MovieService

    service = MovieService(TMDBAdapter())
    page = await service.popular(page=1)
"""

from typing import Any, Optional

from cinefeel.config.settings import Settings, get_settings
from cinefeel.shared.adapters.tmdb_adapter import TMDBAdapter
from cinefeel.shared.schemas.movie import Genre, MovieDetail, MoviePage, MovieSummary


class MovieService:
    """Read-only movie catalog lookups."""

    def __init__(self, adapter: TMDBAdapter, settings: Optional[Settings] = None) -> None:
        self.adapter = adapter
        self.settings = settings or get_settings()

    def image_url(self, path: Optional[str]) -> Optional[str]:
        """Absolute image URL for a TMDB image path, or None."""
        if not path:
            return None
        return f"{self.settings.TMDB_IMAGE_BASE_URL.rstrip('/')}/{path.lstrip('/')}"

    def _summary_fields(self, raw: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": raw["id"],
            "title": raw.get("title") or raw.get("original_title") or "",
            "overview": raw.get("overview") or "",
            "poster_url": self.image_url(raw.get("poster_path")),
            # TMDB sends "" for unknown release dates
            "release_date": raw.get("release_date") or None,
            "vote_average": raw.get("vote_average") or 0.0,
        }

    def _page(self, raw: dict[str, Any]) -> MoviePage:
        return MoviePage(
            page=raw.get("page", 1),
            total_pages=raw.get("total_pages", 0),
            total_results=raw.get("total_results", 0),
            results=[MovieSummary(**self._summary_fields(item)) for item in raw.get("results", [])],
        )

    async def popular(self, page: int = 1) -> MoviePage:
        return self._page(await self.adapter.popular(page))

    async def search(self, query: str, page: int = 1) -> MoviePage:
        return self._page(await self.adapter.search(query, page))

    async def get_movie(self, tmdb_id: int) -> MovieDetail:
        """
        Get one movie's details.

        Raises:
            MovieNotFoundError: If TMDB has no movie with this id
        """
        raw = await self.adapter.movie_details(tmdb_id)
        return MovieDetail(
            **self._summary_fields(raw),
            backdrop_url=self.image_url(raw.get("backdrop_path")),
            runtime=raw.get("runtime"),
            tagline=raw.get("tagline") or None,
            genres=[Genre(id=g["id"], name=g["name"]) for g in raw.get("genres", [])],
        )
