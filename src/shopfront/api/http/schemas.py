"""Response shapes shared by the routers."""

from typing import Any

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Envelope used by every error response."""

    code: str = Field(description="Machine readable error kind")
    message: str = Field(description="Human readable explanation")


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI `responses=` entries documenting the error envelope."""
    return {code: {"model": ErrorResponse} for code in status_codes}


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """`openapi_extra=` entry documenting a raw JSON body with `model`'s schema."""
    return {
        "requestBody": {
            "content": {"application/json": {"schema": model.model_json_schema()}}
        }
    }
