"""
Like Handler

Like, unlike and count likes on a bookmark, addressed by the bookmark's
numeric id (not its TMDB id).
"""

from fastapi import APIRouter, Depends, Path

from cinefeel.api.dependencies import CurrentUserId
from cinefeel.api.dependencies.services import get_like_service
from cinefeel.shared.schemas.bookmark import LikeCountResponse, LikeResponse
from cinefeel.shared.schemas.common import MAX_ID, MessageResponse
from cinefeel.shared.services.like_service import LikeService


router = APIRouter()


@router.post("/{bookmark_id}", response_model=LikeResponse)
async def like_bookmark(
    user_id: CurrentUserId,
    bookmark_id: int = Path(gt=0, le=MAX_ID),
    like_service: LikeService = Depends(get_like_service),
):
    """
    Like a bookmark.

    Raises:
        400: Already liked
        404: No such bookmark, or a private bookmark of another user
    """
    like = await like_service.like(user_id, bookmark_id)
    return LikeResponse(
        id=like.id,
        user_id=like.user_id,
        bookmark_id=like.bookmark_id,
        created_at=like.created_at,
    )


@router.delete("/{bookmark_id}", response_model=MessageResponse)
async def unlike_bookmark(
    user_id: CurrentUserId,
    bookmark_id: int = Path(gt=0, le=MAX_ID),
    like_service: LikeService = Depends(get_like_service),
):
    """Remove the caller's like. Succeeds even if there was no like."""
    await like_service.unlike(user_id, bookmark_id)
    return MessageResponse(message="Like removed")


@router.get("/{bookmark_id}", response_model=LikeCountResponse)
async def count_likes(
    bookmark_id: int = Path(gt=0, le=MAX_ID),
    like_service: LikeService = Depends(get_like_service),
):
    return LikeCountResponse(like_count=await like_service.count(bookmark_id))
