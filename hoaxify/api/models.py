"""
API request and response models.

Pydantic models for FastAPI endpoint parsing and OpenAPI schema generation.
Field rules are not declared here: every field is optional so that missing
or invalid values reach the domain validator and come back as localized
400 responses instead of framework 422 errors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hoaxify.domain.models import RegistrationRequest


class RegisterRequest(BaseModel):
    """Request model for user registration. Unknown fields (e.g. inactive) are ignored."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = Field(default=None, description="4 to 32 characters")
    email: str | None = Field(default=None, description="Valid email address, not yet registered")
    password: str | None = Field(
        default=None,
        description="At least 6 characters with lowercase, uppercase and digit",
    )

    @field_validator("username", "email", "password", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> Any:
        """Read JSON numbers and booleans as their text so the domain rules judge them."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def to_domain(self) -> RegistrationRequest:
        return RegistrationRequest(username=self.username, email=self.email, password=self.password)


class MessageResponse(BaseModel):
    """Response model carrying a localized message."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Response model for rejected registrations, keyed by field name."""

    validation_errors: dict[str, str] = Field(serialization_alias="validationErrors")
