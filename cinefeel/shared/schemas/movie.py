"""
Movie Schemas

Response models for the read-only TMDB proxy endpoints. Poster URLs are
absolute (image base URL already applied) so clients can store them as-is
in a bookmark's posterPath.
"""

from typing import Optional

from pydantic import Field

from cinefeel.shared.schemas.common import BaseSchema


class Genre(BaseSchema):
    id: int
    name: str


class MovieSummary(BaseSchema):
    """A movie in a list (popular, search results)."""

    id: int
    title: str
    overview: str = ""
    poster_url: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: float = 0.0


class MovieDetail(MovieSummary):
    """Full movie details."""

    backdrop_url: Optional[str] = None
    runtime: Optional[int] = None
    tagline: Optional[str] = None
    genres: list[Genre] = Field(default_factory=list)


class MoviePage(BaseSchema):
    """One page of movies, with TMDB's paging metadata."""

    page: int
    total_pages: int
    total_results: int
    results: list[MovieSummary]
