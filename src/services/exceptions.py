"""Shared exceptions for service layer operations."""


class BookmarkAccessDeniedError(Exception):
    """
    Raised when a caller tries to edit or delete a bookmark they do not own.

    Also raised when the bookmark does not exist at all. The message is the
    same in both cases so callers cannot discover other users' bookmark IDs.
    """

    def __init__(self) -> None:
        super().__init__("Access to resources denied")


class CredentialsTakenError(Exception):
    """Raised when an email address is already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Credentials taken")


class InvalidCredentialsError(Exception):
    """Raised on signin with an unknown email or a wrong password."""

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")
