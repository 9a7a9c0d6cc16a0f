"""
Unit tests for the global exception handlers.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.exception_handlers import (
    BAD_REQUEST_TITLE,
    CONFLICT_TITLE,
    INTERNAL_ERROR_TITLE,
    domain_exception_handler,
    global_exception_handler,
    http_exception_handler,
    resolve_domain_exception,
    validation_exception_handler,
)
from app.core.domain import BusinessException, DuplicateEntityException, IllegalStateException


@pytest.fixture
def mock_request():
    request = MagicMock()
    request.method = "GET"
    request.url.path = "/api/customers/1"
    return request


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc,status_code,title",
    [
        (BusinessException("Id 1 not found"), 400, BAD_REQUEST_TITLE),
        (DuplicateEntityException("Customer", ["cpf"]), 409, CONFLICT_TITLE),
        (IllegalStateException("Contact admin"), 500, INTERNAL_ERROR_TITLE),
    ],
)
def test_resolve_domain_exception(exc, status_code, title):
    assert resolve_domain_exception(exc) == (status_code, title)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_domain_exception_body(mock_request):
    response = await domain_exception_handler(mock_request, BusinessException("Id 1 not found"))

    body = _body(response)
    assert response.status_code == 400
    assert body["title"] == BAD_REQUEST_TITLE
    assert body["status"] == 400
    assert body["exception"] == "BusinessException"
    assert body["details"] == {"detail": "Id 1 not found"}
    assert body["timestamp"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_duplicate_lists_conflicting_fields(mock_request):
    exc = DuplicateEntityException("Customer", ["cpf", "email"])

    response = await domain_exception_handler(mock_request, exc)

    details = _body(response)["details"]
    assert response.status_code == 409
    assert details["detail"] == exc.message
    assert "cpf" in details and "email" in details


@pytest.mark.unit
@pytest.mark.asyncio
async def test_validation_errors_keyed_by_field(mock_request):
    exc = RequestValidationError(
        [
            {"loc": ("body", "first_name"), "msg": "String should have at least 1 character", "type": "string_too_short"},
            {
                "loc": ("body", "day_first_installment"),
                "msg": "Value error, must be a future date",
                "type": "value_error",
                "ctx": {"error": ValueError("must be a future date")},
            },
            {"loc": ("query", "customerId"), "msg": "Field required", "type": "missing"},
        ]
    )

    response = await validation_exception_handler(mock_request, exc)

    body = _body(response)
    assert response.status_code == 400
    assert body["title"] == BAD_REQUEST_TITLE
    assert body["details"] == {
        "first_name": "String should have at least 1 character",
        "day_first_installment": "must be a future date",
        "customerId": "Field required",
    }


@pytest.mark.unit
@pytest.mark.asyncio
async def test_http_exception_uses_standard_body(mock_request):
    response = await http_exception_handler(mock_request, StarletteHTTPException(status_code=404, detail="Not Found"))

    body = _body(response)
    assert response.status_code == 404
    assert body["exception"] == "Not Found"
    assert body["details"] == {"detail": "Not Found"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unhandled_exception_is_logged_and_hidden(mock_request, caplog):
    with caplog.at_level("ERROR", logger="app.api.exception_handlers"):
        response = await global_exception_handler(mock_request, RuntimeError("db password leaked"))

    body = _body(response)
    assert response.status_code == 500
    assert body["title"] == INTERNAL_ERROR_TITLE
    assert body["exception"] == "RuntimeError"
    assert "leaked" not in json.dumps(body)
    assert any(record.exc_info for record in caplog.records)
