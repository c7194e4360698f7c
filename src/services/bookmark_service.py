"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import BookmarkAccessDeniedError

logger = logging.getLogger(__name__)


async def list_bookmarks(
    db: AsyncSession,
    user_id: int,
) -> list[Bookmark]:
    """Get all bookmarks for a user in insertion order. Empty list if none."""
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.user_id == user_id)
        .order_by(Bookmark.id),
    )
    return list(result.scalars().all())


async def get_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark | None:
    """
    Get a bookmark by ID, scoped to user. Returns None if not found or wrong user.

    Unlike edit/delete this never raises for another user's bookmark: it is
    reported exactly like a missing one.
    """
    result = await db.execute(
        select(Bookmark).where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        ),
    )
    return result.scalar_one_or_none()


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """
    Create a new bookmark owned by user_id.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        user_id=user_id,
        title=data.title,
        link=data.link,
        description=data.description,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def _get_owned_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark:
    """
    Load a bookmark for mutation and verify the caller owns it.

    The lookup is by ID alone so a missing row and a foreign row take the same
    path. The row is locked until the request transaction ends (ignored by
    SQLite, which has no row locks).

    Raises:
        BookmarkAccessDeniedError: If the bookmark doesn't exist or isn't owned by user_id.
    """
    result = await db.execute(
        select(Bookmark).where(Bookmark.id == bookmark_id).with_for_update(),
    )
    bookmark = result.scalar_one_or_none()

    if bookmark is None or bookmark.user_id != user_id:
        logger.warning(
            "Denied access to bookmark %s for user %s",
            bookmark_id,
            user_id,
        )
        raise BookmarkAccessDeniedError()

    return bookmark


async def edit_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Update the fields present in data. Fields absent from the request are left unchanged.

    Raises:
        BookmarkAccessDeniedError: If the bookmark doesn't exist or isn't owned by user_id.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await _get_owned_bookmark(db, user_id, bookmark_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(bookmark, field, value)

    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def delete_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> None:
    """
    Permanently delete a bookmark.

    Raises:
        BookmarkAccessDeniedError: If the bookmark doesn't exist or isn't owned by user_id.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await _get_owned_bookmark(db, user_id, bookmark_id)
    await db.delete(bookmark)
    await db.flush()
