"""Tests for the validation error handler."""

import json
from unittest.mock import Mock

import pytest
from fastapi.exceptions import RequestValidationError

from driverlog.middleware.error_handler import validation_exception_handler


class TestValidationExceptionHandler:
    """Tests for validation_exception_handler."""

    @pytest.mark.asyncio
    async def test_fields_use_plain_messages(self):
        exc = RequestValidationError(
            [
                {
                    "type": "value_error",
                    "loc": ("body", "date"),
                    "msg": "Value error, Date is required",
                    "input": "",
                    "ctx": {"error": ValueError("Date is required")},
                },
                {
                    "type": "string_pattern_mismatch",
                    "loc": ("query", "start_time"),
                    "msg": "String should match pattern",
                    "input": "25:00",
                },
            ]
        )

        response = await validation_exception_handler(Mock(), exc)

        assert response.status_code == 422
        body = json.loads(response.body)
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"]["fields"] == {
            "date": ["Date is required"],
            "start_time": ["String should match pattern"],
        }
        assert all("ctx" not in e for e in body["error"]["details"]["errors"])
