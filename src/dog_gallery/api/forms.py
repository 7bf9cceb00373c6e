"""Pydantic models for submitted HTML forms."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginForm(BaseModel):
    """Login form payload."""

    username: str = ""

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: object) -> str:
        return value.strip() if isinstance(value, str) else ""


class SaveForm(BaseModel):
    """Save form payload; an empty field means "use the current image"."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str | None = Field(default=None, alias="imageUrl")

    @field_validator("image_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> str | None:
        if not isinstance(value, str):
            return None
        return value.strip() or None
