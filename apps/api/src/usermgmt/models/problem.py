"""Problem response model for server errors."""

from typing import ClassVar

from pydantic import BaseModel


class ProblemDetail(BaseModel):
    """Body of a 500 problem response."""

    detail: str

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {"example": {"detail": "An unexpected error occurred."}}
