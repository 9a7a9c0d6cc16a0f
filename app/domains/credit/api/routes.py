"""
Credit API Routes

FastAPI routers for customers and credits.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from app.domains.credit.api.dependencies import (
    get_credit_create_request,
    get_credit_service,
    get_customer_service,
)
from app.domains.credit.api.schemas import (
    CreditCreateRequest,
    CreditResponse,
    CreditSummaryResponse,
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from app.domains.credit.application.services import CreditService, CustomerService

customers_router = APIRouter(prefix="/customers", tags=["Customers"])
credits_router = APIRouter(prefix="/credits", tags=["Credits"])


# ==================== Customers ====================


@customers_router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def save_customer(
    request: CustomerCreateRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Register a new customer. cpf and email must not be in use."""
    customer = await service.save(request.to_entity())
    return CustomerResponse.from_entity(customer)


@customers_router.get("/{customer_id}", response_model=CustomerResponse)
async def find_customer_by_id(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    """Get a customer by ID."""
    customer = await service.find_by_id(customer_id)
    return CustomerResponse.from_entity(customer)


@customers_router.patch("", response_model=CustomerResponse)
async def update_customer(
    request: CustomerUpdateRequest,
    customer_id: int = Query(..., alias="customerId"),
    service: CustomerService = Depends(get_customer_service),
):
    """Update the mutable fields of a customer."""
    customer = await service.update(customer_id, request.to_changes())
    return CustomerResponse.from_entity(customer)


@customers_router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer together with all its credits."""
    await service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== Credits ====================


@credits_router.post(
    "",
    response_model=CreditResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CreditCreateRequest.model_json_schema(by_alias=True)}},
        }
    },
)
async def save_credit(
    request: CreditCreateRequest = Depends(get_credit_create_request),
    service: CreditService = Depends(get_credit_service),
):
    """Request a new credit for an existing customer."""
    credit = await service.save(request.to_entity())
    return CreditResponse.from_entity(credit)


@credits_router.get("", response_model=list[CreditSummaryResponse])
async def find_all_credits_by_customer(
    customer_id: int = Query(..., alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    """List the credits of a customer."""
    credits = await service.find_all_by_customer(customer_id)
    return [CreditSummaryResponse.from_entity(credit) for credit in credits]


@credits_router.get("/{credit_code}", response_model=CreditResponse)
async def find_credit_by_code(
    credit_code: UUID,
    customer_id: int = Query(..., alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    """Get a credit by code. The credit must belong to the given customer."""
    credit = await service.find_by_credit_code(customer_id, credit_code)
    return CreditResponse.from_entity(credit)


__all__ = ["customers_router", "credits_router"]
