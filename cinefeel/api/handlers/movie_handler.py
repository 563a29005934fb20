"""
Movie Handler

Read-only proxy over the TMDB catalog, so the TMDB API key never leaves
the server. No session required.
"""

from fastapi import APIRouter, Depends, Path, Query

from cinefeel.api.dependencies.services import get_movie_service
from cinefeel.shared.schemas.movie import MovieDetail, MoviePage
from cinefeel.shared.services.movie_service import MovieService


router = APIRouter()


@router.get("/popular", response_model=MoviePage)
async def popular_movies(
    page: int = Query(1, ge=1, le=500, description="Page number"),
    movie_service: MovieService = Depends(get_movie_service),
):
    """Currently popular movies."""
    return await movie_service.popular(page)


@router.get("/search", response_model=MoviePage)
async def search_movies(
    query: str = Query(..., min_length=1, description="Title to search for"),
    page: int = Query(1, ge=1, le=500, description="Page number"),
    movie_service: MovieService = Depends(get_movie_service),
):
    """Search movies by title."""
    return await movie_service.search(query, page)


@router.get("/{tmdb_id}", response_model=MovieDetail)
async def get_movie(
    tmdb_id: int = Path(gt=0),
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Movie details.

    Raises:
        404: TMDB has no movie with this id
    """
    return await movie_service.get_movie(tmdb_id)
