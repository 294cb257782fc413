"""Category request and response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blogdash.configs.settings import MAX_TITLE_LENGTH


class CategoryCreate(BaseModel):
    """Category creation model. The owner comes from the `userId` query parameter."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Category title",
        examples=["Frontend"],
    )


class CategoryUpdate(BaseModel):
    """Category update model. Only the title can change."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="New category title",
        examples=["Backend"],
    )


class CategoryResponse(BaseModel):
    """Category response model."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    user_id: UUID = Field(alias="userId")
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class CategoryMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    category: CategoryResponse
