"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
Used to document error bodies in the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "electric",
                "message": "ICE vehicles (scooter/motorcycle) cannot have electric specs",
                "code": "FIELD_NOT_ALLOWED",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array); detail is the
      field messages joined with ". "

    Examples:
        Simple error:
            {
                "detail": "A vehicle with this slug already exists",
                "code": "CONFLICT"
            }

        Validation error with multiple fields:
            {
                "detail": "EV vehicles cannot have engine specs. EV vehicles cannot have mileage/performance",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "engine", "message": "EV vehicles cannot have engine specs", "code": "FIELD_NOT_ALLOWED"},
                    {"field": "performance", "message": "EV vehicles cannot have mileage/performance", "code": "FIELD_NOT_ALLOWED"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "A vehicle with this slug already exists", "code": "CONFLICT"},
                {
                    "detail": "EV vehicles cannot have engine specs. "
                    "EV vehicles cannot have mileage/performance",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "engine",
                            "message": "EV vehicles cannot have engine specs",
                            "code": "FIELD_NOT_ALLOWED",
                        },
                        {
                            "field": "performance",
                            "message": "EV vehicles cannot have mileage/performance",
                            "code": "FIELD_NOT_ALLOWED",
                        },
                    ],
                },
            ]
        }
    )
