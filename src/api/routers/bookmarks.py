"""Bookmark CRUD endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.bookmark import (
    MAX_BOOKMARK_ID,
    MIN_BOOKMARK_ID,
    BookmarkCreate,
    BookmarkResponse,
    BookmarkUpdate,
)
from services import bookmark_service
from services.exceptions import BookmarkAccessDeniedError

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

BookmarkId = Annotated[int, Path(ge=MIN_BOOKMARK_ID, le=MAX_BOOKMARK_ID)]


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks owned by the current user."""
    bookmarks = await bookmark_service.list_bookmarks(db, current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse | None)
async def get_bookmark(
    bookmark_id: BookmarkId,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | None:
    """
    Get a single bookmark by ID.

    Returns null (not 404) when the bookmark doesn't exist or belongs to
    someone else.
    """
    bookmark = await bookmark_service.get_bookmark(db, current_user.id, bookmark_id)
    if bookmark is None:
        return None
    return BookmarkResponse.model_validate(bookmark)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark owned by the current user."""
    bookmark = await bookmark_service.create_bookmark(db, current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def edit_bookmark(
    bookmark_id: BookmarkId,
    data: BookmarkUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update the supplied fields of a bookmark. 403 if absent or not owned."""
    try:
        bookmark = await bookmark_service.edit_bookmark(
            db, current_user.id, bookmark_id, data,
        )
    except BookmarkAccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(
    bookmark_id: BookmarkId,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Permanently delete a bookmark. 403 if absent or not owned."""
    try:
        await bookmark_service.delete_bookmark(db, current_user.id, bookmark_id)
    except BookmarkAccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
