"""Tests for BookmarkService, mostly the atomic update."""
import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cinefeel.shared.core.exceptions import BookmarkNotFoundError
from cinefeel.shared.models import Bookmark, Tag, User
from cinefeel.shared.repositories.bookmark_repository import BookmarkRepository
from cinefeel.shared.repositories.tag_repository import TagRepository
from cinefeel.shared.schemas.bookmark import BookmarkUpdate
from cinefeel.shared.services.bookmark_service import BookmarkService


async def _create_user(session: AsyncSession, email: str = "alice@example.com", nickname: str = "alice") -> User:
    user = User(email=email, password_hash="$2b$04$placeholder", nickname=nickname)
    session.add(user)
    await session.flush()
    return user


@pytest.fixture
async def seeded(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """A committed user owning bookmark 603 (note "original", public, tagged "drama")."""
    async with session_factory() as session:
        user = await _create_user(session)
        service = BookmarkService(session)
        await service.create_bookmark(user.id, 603, "The Matrix")
        await service.update_bookmark(
            user.id, 603, BookmarkUpdate(note="original", is_public=True, tags=["drama"]),
        )
        await session.commit()
        return user.id


async def _reload(session_factory: async_sessionmaker[AsyncSession], user_id: int) -> Bookmark:
    async with session_factory() as session:
        bookmark = await BookmarkRepository(session).get_by_owner_and_tmdb(user_id, 603)
        assert bookmark is not None
        return bookmark


async def test_create_bookmark_is_idempotent(db_session: AsyncSession) -> None:
    user = await _create_user(db_session)
    service = BookmarkService(db_session)

    first, created_first = await service.create_bookmark(user.id, 603, "The Matrix", "/p.jpg")
    second, created_second = await service.create_bookmark(user.id, 603, "Other title", None)

    assert created_first is True
    assert created_second is False
    assert second.id == first.id
    assert second.title == "The Matrix"
    assert second.poster_path == "/p.jpg"
    assert second.is_public is False


async def test_update_applies_all_fields(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
) -> None:
    bookmark = await _reload(session_factory, seeded)

    assert bookmark.note == "original"
    assert bookmark.is_public is True
    assert bookmark.tag_names == ["drama"]


async def test_partial_update_keeps_omitted_fields(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
) -> None:
    async with session_factory() as session:
        updated = await BookmarkService(session).update_bookmark(
            seeded, 603, BookmarkUpdate(tags=["scifi", "90s"]),
        )
        await session.commit()

    assert updated.note == "original"
    assert updated.is_public is True
    assert updated.tag_names == ["90s", "scifi"]


async def test_tags_are_replaced_not_merged(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
) -> None:
    async with session_factory() as session:
        await BookmarkService(session).update_bookmark(seeded, 603, BookmarkUpdate(tags=["a", "b"]))
        await session.commit()
    async with session_factory() as session:
        await BookmarkService(session).update_bookmark(seeded, 603, BookmarkUpdate(tags=["c"]))
        await session.commit()

    assert (await _reload(session_factory, seeded)).tag_names == ["c"]


async def test_duplicate_tags_after_normalization_are_stored_once(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
) -> None:
    async with session_factory() as session:
        updated = await BookmarkService(session).update_bookmark(
            seeded, 603, BookmarkUpdate(tags=["#scifi", "scifi", " scifi "]),
        )
        await session.commit()

    assert updated.tag_names == ["scifi"]


async def test_note_null_clears_note(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
) -> None:
    async with session_factory() as session:
        await BookmarkService(session).update_bookmark(
            seeded, 603, BookmarkUpdate.model_validate({"note": None}),
        )
        await session.commit()

    bookmark = await _reload(session_factory, seeded)
    assert bookmark.note is None
    assert bookmark.is_public is True


@pytest.mark.parametrize(
    ("repository", "method"),
    [
        (TagRepository, "upsert_many"),
        (BookmarkRepository, "replace_tags"),
    ],
)
async def test_failed_tag_write_rolls_back_field_changes(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
    monkeypatch: pytest.MonkeyPatch,
    repository: type,
    method: str,
) -> None:
    async def fail(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(repository, method, fail)

    async with session_factory() as session:
        service = BookmarkService(session)
        with pytest.raises(RuntimeError):
            await service.update_bookmark(
                seeded, 603, BookmarkUpdate(note="changed", is_public=False, tags=["scifi"]),
            )

    bookmark = await _reload(session_factory, seeded)
    assert bookmark.note == "original"
    assert bookmark.is_public is True
    assert bookmark.tag_names == ["drama"]

    async with session_factory() as session:
        names = (await session.execute(select(Tag.name))).scalars().all()
    assert names == ["drama"]


async def test_update_unknown_bookmark(db_session: AsyncSession) -> None:
    user = await _create_user(db_session)

    with pytest.raises(BookmarkNotFoundError):
        await BookmarkService(db_session).update_bookmark(user.id, 603, BookmarkUpdate(note="x"))


async def test_update_is_scoped_to_owner(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: int,
) -> None:
    async with session_factory() as session:
        other = await _create_user(session, "bob@example.com", "bob")
        with pytest.raises(BookmarkNotFoundError):
            await BookmarkService(session).update_bookmark(other.id, 603, BookmarkUpdate(note="x"))


async def test_public_feed_only_public_newest_first(
    db_session: AsyncSession,
) -> None:
    alice = await _create_user(db_session)
    bob = await _create_user(db_session, "bob@example.com", "bob")
    service = BookmarkService(db_session)
    for owner, tmdb_id, public in [(alice, 1, True), (bob, 2, False), (bob, 3, True), (alice, 4, True)]:
        await service.create_bookmark(owner.id, tmdb_id, f"Movie {tmdb_id}")
        await service.update_bookmark(owner.id, tmdb_id, BookmarkUpdate(is_public=public))

    feed = await service.list_public_bookmarks()

    assert [b.tmdb_id for b in feed] == [4, 3, 1]
    assert [b.user.nickname for b in feed] == ["alice", "bob", "alice"]


async def test_public_feed_limit(db_session: AsyncSession) -> None:
    user = await _create_user(db_session)
    service = BookmarkService(db_session)
    for tmdb_id in range(1, 6):
        await service.create_bookmark(user.id, tmdb_id, f"Movie {tmdb_id}")
        await service.update_bookmark(user.id, tmdb_id, BookmarkUpdate(is_public=True))

    feed = await service.list_public_bookmarks(limit=3)

    assert [b.tmdb_id for b in feed] == [5, 4, 3]
