"""REST API error response models.

Documents the JSON shape every error response shares, for use in route
`responses=` declarations and the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One field-level problem inside a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "sort_key",
                "message": "Must not be empty",
                "code": "REQUIRED",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Data source down:
            {
                "detail": "Failed to fetch motorcycles",
                "code": "DATA_SOURCE_UNAVAILABLE"
            }

        Invalid query:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "sort_order", "message": "...", "code": "enum"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Failed to fetch motorcycles", "code": "DATA_SOURCE_UNAVAILABLE"},
                {"detail": "Motorcycle catalog is still loading", "code": "DATASET_NOT_LOADED"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "sort_order",
                            "message": "Input should be 'asc' or 'desc'",
                            "code": "enum",
                        }
                    ],
                },
            ]
        }
    )
