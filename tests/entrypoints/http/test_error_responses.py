"""Tests for REST error response models."""

from dealer_catalog.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    """Tests for ErrorDetail model."""

    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(
            field="engine",
            message="EV vehicles cannot have engine specs",
            code="FIELD_NOT_ALLOWED",
        )

        assert detail.model_dump() == {
            "field": "engine",
            "message": "EV vehicles cannot have engine specs",
            "code": "FIELD_NOT_ALLOWED",
        }

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="name", message="Vehicle name is required")

        assert detail.code is None

    def test_example_is_valid(self) -> None:
        schema = ErrorDetail.model_json_schema()

        ErrorDetail(**schema["example"])


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_creates_simple_error_response(self) -> None:
        response = ErrorResponse(detail="A vehicle with this slug already exists", code="CONFLICT")

        assert response.errors is None
        assert response.model_dump(exclude_none=True) == {
            "detail": "A vehicle with this slug already exists",
            "code": "CONFLICT",
        }

    def test_parses_validation_error_from_dict(self) -> None:
        """The body produced by the domain error handler parses back into the model."""
        response = ErrorResponse.model_validate(
            {
                "detail": "ICE vehicles (scooter/motorcycle) cannot have electric specs",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "electric",
                        "message": "ICE vehicles (scooter/motorcycle) cannot have electric specs",
                        "code": "FIELD_NOT_ALLOWED",
                    }
                ],
            }
        )

        assert response.errors is not None
        assert response.errors[0].field == "electric"

    def test_schema_examples_are_valid(self) -> None:
        examples = ErrorResponse.model_json_schema()["examples"]

        assert len(examples) == 2
        for example in examples:
            ErrorResponse(**example)

    def test_validation_example_detail_joins_field_messages(self) -> None:
        example = ErrorResponse.model_json_schema()["examples"][1]

        assert example["detail"] == ". ".join(error["message"] for error in example["errors"])
