"""
Public Bookmark Handler

The public feed: the most recent public bookmarks from all users, with
author, tags and likes. No session required.
"""

from fastapi import APIRouter, Depends

from cinefeel.api.dependencies.services import get_bookmark_service
from cinefeel.shared.models.bookmark import Bookmark
from cinefeel.shared.schemas.bookmark import AuthorResponse, PublicBookmarkResponse
from cinefeel.shared.services.bookmark_service import BookmarkService


router = APIRouter()


def _build_public_response(bookmark: Bookmark) -> PublicBookmarkResponse:
    """Helper to build PublicBookmarkResponse (user, tags and likes loaded)."""
    return PublicBookmarkResponse(
        id=bookmark.id,
        tmdb_id=bookmark.tmdb_id,
        title=bookmark.title,
        poster_path=bookmark.poster_path,
        note=bookmark.note,
        is_public=bookmark.is_public,
        created_at=bookmark.created_at,
        tags=bookmark.tag_names,
        like_count=bookmark.like_count,
        liked_user_ids=[like.user_id for like in bookmark.likes],
        author=AuthorResponse(id=bookmark.user.id, nickname=bookmark.user.nickname),
    )


@router.get("", response_model=list[PublicBookmarkResponse])
async def list_public_bookmarks(
    bookmark_service: BookmarkService = Depends(get_bookmark_service),
):
    """Up to PUBLIC_FEED_LIMIT (50) public bookmarks, newest first."""
    bookmarks = await bookmark_service.list_public_bookmarks()
    return [_build_public_response(b) for b in bookmarks]
