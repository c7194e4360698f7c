"""Service layer for user account operations."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import hash_password, verify_password
from models.user import User
from schemas.user import AuthCredentials, UserUpdate
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by email (case-insensitive)."""
    result = await db.execute(select(User).where(User.email == _normalize_email(email)))
    return result.scalar_one_or_none()


async def signup(db: AsyncSession, data: AuthCredentials) -> User:
    """
    Register a new user with a hashed password.

    Raises:
        CredentialsTakenError: If the email is already registered.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    email = _normalize_email(data.email)
    if await get_user_by_email(db, email) is not None:
        raise CredentialsTakenError(email)

    user = User(email=email, password_hash=hash_password(data.password))
    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


async def signin(db: AsyncSession, data: AuthCredentials) -> User:
    """
    Verify email and password and return the matching user.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong.
    """
    user = await get_user_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.password_hash):
        raise InvalidCredentialsError()
    return user


async def edit_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Update the fields present in data on the given user.

    Raises:
        CredentialsTakenError: If the new email belongs to another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)

    if "email" in update_data:
        update_data["email"] = _normalize_email(update_data["email"])
        existing = await get_user_by_email(db, update_data["email"])
        if existing is not None and existing.id != user.id:
            raise CredentialsTakenError(update_data["email"])

    for field, value in update_data.items():
        setattr(user, field, value)

    await db.flush()
    await db.refresh(user)
    return user
