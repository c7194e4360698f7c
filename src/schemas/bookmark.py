"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Range of the INTEGER primary key; ids outside it are rejected before querying
MIN_BOOKMARK_ID = -(2**31)
MAX_BOOKMARK_ID = 2**31 - 1

# Fields that may be omitted from an update but never set to null
NON_NULLABLE_UPDATE_FIELDS = ("title", "link")


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Unknown fields (including any attempt to pass a user_id) are ignored; the
    owner is always the authenticated caller.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=500)
    link: str = Field(min_length=1)
    description: str | None = None


class BookmarkUpdate(BaseModel):
    """
    Schema for partially updating an existing bookmark.

    Only fields present in the request body are applied. description may be
    cleared with null; title and link may not.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=500)
    link: str | None = Field(default=None, min_length=1)
    description: str | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "BookmarkUpdate":
        """Reject explicit nulls for fields that are required on the model."""
        for field in NON_NULLABLE_UPDATE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    link: str
    description: str | None
    created_at: datetime
    updated_at: datetime
