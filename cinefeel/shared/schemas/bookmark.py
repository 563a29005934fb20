"""
Bookmark Schemas

Request/response models for bookmark, public feed and like endpoints.

Partial Updates:
================
BookmarkUpdate distinguishes "field omitted" from "field sent as null"
through pydantic's ``model_fields_set``:

    {"tags": ["y"]}          → note and isPublic untouched
    {"note": null}           → note cleared
    {"tags": []}             → all tags removed
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, StrictBool, field_validator

from cinefeel.shared.models.tag import TAG_NAME_MAX_LENGTH
from cinefeel.shared.schemas.common import MAX_ID, BaseSchema


def normalize_tags(tags: list[str]) -> list[str]:
    """
    Normalize submitted tag names.

    Each tag is trimmed, then loses one leading '#'. Empty results are
    dropped. No case folding, no dedupe (the write step dedupes).

    Example:
        normalize_tags(["#Action", "  comedy ", "#", ""]) == ["Action", "comedy"]
    """
    normalized = []
    for tag in tags:
        name = tag.strip()
        if name.startswith("#"):
            name = name[1:]
        if name:
            normalized.append(name)
    return normalized


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class BookmarkCreate(BaseSchema):
    """Schema for POST /bookmarks."""

    tmdb_id: int = Field(gt=0, le=MAX_ID, description="TMDB movie id")
    title: str = Field(min_length=1, max_length=500)
    poster_path: Optional[str] = Field(default=None, max_length=1000)


class BookmarkUpdate(BaseSchema):
    """Schema for PATCH /bookmarks/{tmdb_id}. Every field is optional."""

    note: Optional[str] = None
    is_public: Optional[StrictBool] = None
    tags: Optional[list[str]] = None

    @field_validator("tags")
    @classmethod
    def tags_fit_column(cls, tags: Optional[list[str]]) -> Optional[list[str]]:
        """Reject tags longer than a stored tag name once normalized."""
        if tags is None:
            return tags
        for name in normalize_tags(tags):
            if len(name) > TAG_NAME_MAX_LENGTH:
                raise ValueError(f"tag must be at most {TAG_NAME_MAX_LENGTH} characters")
        return tags

    def scalar_changes(self) -> dict:
        """
        Column values to write, limited to fields the client actually sent.

        note may be cleared with null; is_public is only written when a
        boolean was sent.
        """
        changes = {}
        if "note" in self.model_fields_set:
            changes["note"] = self.note
        if "is_public" in self.model_fields_set and self.is_public is not None:
            changes["is_public"] = self.is_public
        return changes

    def tag_names(self) -> Optional[list[str]]:
        """Normalized, de-duplicated tags, or None if tags were not sent."""
        if self.tags is None:
            return None
        return list(dict.fromkeys(normalize_tags(self.tags)))


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class BookmarkResponse(BaseSchema):
    """A bookmark as shown to its owner."""

    id: int
    tmdb_id: int
    title: str
    poster_path: Optional[str] = None
    note: Optional[str] = None
    is_public: bool
    created_at: datetime
    tags: list[str] = []
    like_count: int = 0


class AuthorResponse(BaseSchema):
    id: int
    nickname: str


class PublicBookmarkResponse(BookmarkResponse):
    """A bookmark in the public feed."""

    author: AuthorResponse
    liked_user_ids: list[int] = []


class LikeResponse(BaseSchema):
    """A stored like."""

    id: int
    user_id: int
    bookmark_id: int
    created_at: datetime


class LikeCountResponse(BaseSchema):
    like_count: int
