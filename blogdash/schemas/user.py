"""User request and response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from blogdash.configs.settings import MAX_USERNAME_LENGTH


class UserCreate(BaseModel):
    """User creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str = Field(
        ...,
        min_length=3,
        max_length=MAX_USERNAME_LENGTH,
        description="Username",
        examples=["johndoe"],
    )
    email: EmailStr = Field(
        ...,
        description="Email address",
        examples=["johndoe@gmail.com"],
    )


class UserUpdate(BaseModel):
    """Rename request. The user id travels in the body, as a raw string."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: str | None = Field(default=None, alias="userId", description="User ID")
    new_username: str = Field(
        ...,
        alias="newUsername",
        min_length=3,
        max_length=MAX_USERNAME_LENGTH,
        description="New username",
        examples=["janedoe"],
    )


class UserResponse(BaseModel):
    """User response model."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    username: str
    email: str
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class UserMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user: UserResponse
