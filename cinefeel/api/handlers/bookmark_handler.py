"""
Bookmark Handler

Handles the caller's own bookmarks. Every route requires a session; a
bookmark is addressed by its TMDB id and is only visible to its owner.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
"""

from fastapi import APIRouter, Depends, Path, Response, status

from cinefeel.api.dependencies import CurrentUserId
from cinefeel.api.dependencies.services import get_bookmark_service
from cinefeel.shared.models.bookmark import Bookmark
from cinefeel.shared.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from cinefeel.shared.schemas.common import MAX_ID, SuccessResponse
from cinefeel.shared.services.bookmark_service import BookmarkService


router = APIRouter()


def _build_bookmark_response(bookmark: Bookmark) -> BookmarkResponse:
    """Helper to build BookmarkResponse from ORM object (relations loaded)."""
    return BookmarkResponse(
        id=bookmark.id,
        tmdb_id=bookmark.tmdb_id,
        title=bookmark.title,
        poster_path=bookmark.poster_path,
        note=bookmark.note,
        is_public=bookmark.is_public,
        created_at=bookmark.created_at,
        tags=bookmark.tag_names,
        like_count=bookmark.like_count,
    )


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    user_id: CurrentUserId,
    bookmark_service: BookmarkService = Depends(get_bookmark_service),
):
    """List the caller's bookmarks, newest first, with tags and like counts."""
    bookmarks = await bookmark_service.list_user_bookmarks(user_id)
    return [_build_bookmark_response(b) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_bookmark(
    request: BookmarkCreate,
    response: Response,
    user_id: CurrentUserId,
    bookmark_service: BookmarkService = Depends(get_bookmark_service),
):
    """
    Bookmark a movie.

    Returns 201 for a new bookmark, or 200 with the existing bookmark
    (unchanged) if the caller already bookmarked this movie.
    """
    bookmark, created = await bookmark_service.create_bookmark(
        user_id=user_id,
        tmdb_id=request.tmdb_id,
        title=request.title,
        poster_path=request.poster_path,
    )
    if not created:
        response.status_code = status.HTTP_200_OK

    return _build_bookmark_response(bookmark)


@router.get("/{tmdb_id}", response_model=BookmarkResponse)
async def get_bookmark(
    user_id: CurrentUserId,
    tmdb_id: int = Path(gt=0, le=MAX_ID),
    bookmark_service: BookmarkService = Depends(get_bookmark_service),
):
    """Get the caller's bookmark for a movie (404 if none)."""
    bookmark = await bookmark_service.get_bookmark(user_id, tmdb_id)
    return _build_bookmark_response(bookmark)


@router.patch("/{tmdb_id}", response_model=BookmarkResponse)
async def update_bookmark(
    changes: BookmarkUpdate,
    user_id: CurrentUserId,
    tmdb_id: int = Path(gt=0, le=MAX_ID),
    bookmark_service: BookmarkService = Depends(get_bookmark_service),
):
    """
    Update note, visibility and/or tags.

    Only fields present in the body change. Sending tags replaces the whole
    tag set; an empty list removes all tags.
    """
    bookmark = await bookmark_service.update_bookmark(user_id, tmdb_id, changes)
    return _build_bookmark_response(bookmark)


@router.delete("/{tmdb_id}", response_model=SuccessResponse)
async def delete_bookmark(
    user_id: CurrentUserId,
    tmdb_id: int = Path(gt=0, le=MAX_ID),
    bookmark_service: BookmarkService = Depends(get_bookmark_service),
):
    """Delete the caller's bookmark with its tag links and likes."""
    await bookmark_service.delete_bookmark(user_id, tmdb_id)
    return SuccessResponse(success=True)
