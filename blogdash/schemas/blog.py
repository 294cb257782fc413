"""
Blog request and response models.

Ownership (`userId`) and category (`categoryId`) are never part of a body:
they arrive as query parameters and are checked before the body is used.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blogdash.configs.settings import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH


class BlogCreate(BaseModel):
    """Blog creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["Getting started with React"],
    )
    description: str | None = Field(
        default=None,
        max_length=MAX_DESCRIPTION_LENGTH,
        description="Blog description",
        examples=["Hooks, state and effects in practice"],
    )


class BlogUpdate(BaseModel):
    """Blog update model (all fields optional, relations are not updatable)."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "React 19 in practice",
                "description": "What changed and what to migrate first",
            },
        },
    )

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="New blog title",
    )
    description: str | None = Field(
        default=None,
        max_length=MAX_DESCRIPTION_LENGTH,
        description="New blog description",
    )


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    description: str | None = None
    user_id: UUID = Field(alias="userId")
    category_id: UUID = Field(alias="categoryId")
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class BlogMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    blog: BlogResponse


class BlogDetailResponse(BaseModel):
    blog: BlogResponse
