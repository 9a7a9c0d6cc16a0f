"""
Credit API Dependencies

FastAPI dependencies for the credit domain.
"""

from typing import Any

from fastapi import Body, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.container import DependencyContainer, get_container
from app.database.async_db import get_async_db
from app.domains.credit.api.schemas import CreditCreateRequest
from app.domains.credit.application.services import CreditService, CustomerService


def get_customer_service(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> CustomerService:
    """Get CustomerService bound to the request session."""
    return container.create_customer_service(db)


def get_credit_service(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> CreditService:
    """Get CreditService bound to the request session."""
    return container.create_credit_service(db)


def get_credit_create_request(
    body: dict[str, Any] = Body(...),
    container: DependencyContainer = Depends(get_container),
) -> CreditCreateRequest:
    """
    Parse the credit request body against the container clock.

    The future date check then agrees with the window enforced by CreditService.
    """
    try:
        return CreditCreateRequest.model_validate(body, context={"today": container.get_clock()})
    except ValidationError as e:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)]
        raise RequestValidationError(errors, body=body) from e


__all__ = [
    "get_customer_service",
    "get_credit_service",
    "get_credit_create_request",
]
