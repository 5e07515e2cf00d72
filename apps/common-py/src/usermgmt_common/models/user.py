"""User model for User API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model.

    Name and email are plain strings here; their constraints are checked by
    ``usermgmt_common.services.validation`` so failures can be reported as a
    field error list rather than a schema error.
    """

    id: int = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")

    class Config:
        """Pydantic config."""

        frozen = True
        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }


class FieldError(BaseModel):
    """A single field-level validation failure."""

    property_name: str = Field(..., alias="propertyName")
    error_message: str = Field(..., alias="errorMessage")

    class Config:
        """Pydantic config."""

        populate_by_name = True
        frozen = True
        json_schema_extra: ClassVar[dict] = {
            "example": {
                "propertyName": "email",
                "errorMessage": "Email is not a valid email address.",
            }
        }

    def to_response(self) -> dict[str, str]:
        """Serialize with the camelCase names used on the wire."""
        return self.model_dump(by_alias=True)
