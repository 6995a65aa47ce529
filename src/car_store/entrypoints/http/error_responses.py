"""REST API envelope models.

Every error leaves the API as a single-field JSON object; successful
mutations without a resource body answer with a message.
"""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error envelope shared by all endpoints.

    Examples:
        {"error": "Car not found"}
        {"error": "Rating must be between 1 and 5"}
    """

    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"error": "Car not found"},
                {"error": "Invalid car ID"},
                {"error": "Authorization header required"},
            ]
        }
    )


class MessageResponse(BaseModel):
    message: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Car updated successfully"}}
    )


def error_responses(*status_codes: int) -> dict[int | str, dict]:
    """OpenAPI `responses` entries documenting the error envelope."""
    return {code: {"model": ErrorResponse} for code in status_codes}
