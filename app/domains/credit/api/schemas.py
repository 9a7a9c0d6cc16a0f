"""
Credit API Schemas

Pydantic schemas for API request/response validation and their mapping
to and from domain entities.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from app.core.domain import Address
from app.core.shared.validators import CPFValidator, ValidationError
from app.domains.credit.application.dto import CustomerUpdateData
from app.domains.credit.domain.entities import Credit, Customer
from app.domains.credit.domain.entities.credit import MAX_NUMBER_OF_INSTALLMENTS
from app.domains.credit.domain.value_objects import CreditStatus


class CamelModel(BaseModel):
    """Base schema exposing fields in camelCase while accepting snake_case too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ==================== Customer Schemas ====================


class CustomerCreateRequest(CamelModel):
    """Customer registration request schema."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, description="Customer first name")
    last_name: str = Field(..., min_length=1, description="Customer last name")
    cpf: str = Field(..., min_length=1, description="CPF, formatted (000.000.000-00) or 11 digits")
    income: Decimal = Field(..., ge=0, description="Monthly income")
    email: EmailStr = Field(..., description="Contact email, unique per customer")
    password: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        try:
            return CPFValidator.validate(v)
        except ValidationError as e:
            raise ValueError(e.message) from e

    def to_entity(self) -> Customer:
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            cpf=self.cpf,
            email=str(self.email),
            income=self.income,
            password=self.password,
            address=Address(zip_code=self.zip_code, street=self.street),
        )


class CustomerUpdateRequest(CamelModel):
    """
    Customer partial update request schema.

    Only the fields present in the request body are applied. cpf and email
    cannot be changed.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str | None = Field(None, min_length=1)
    last_name: str | None = Field(None, min_length=1)
    income: Decimal | None = Field(None, ge=0)
    zip_code: str | None = Field(None, min_length=1)
    street: str | None = Field(None, min_length=1)

    def to_changes(self) -> CustomerUpdateData:
        return CustomerUpdateData(**self.model_dump(exclude_unset=True, exclude_none=True))


class CustomerResponse(CamelModel):
    """Customer response schema. The password is never returned."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    income: Decimal
    email: str
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        address = customer.address
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            income=customer.income,
            email=customer.email,
            zip_code=address.zip_code if address else "",
            street=address.street if address else "",
        )


# ==================== Credit Schemas ====================


class CreditCreateRequest(CamelModel):
    """
    Credit request schema.

    The "today" used by the future date check can be supplied as a clock in
    the validation context (``context={"today": callable}``).
    """

    credit_value: Decimal = Field(..., gt=0, description="Requested amount")
    day_first_installment: date = Field(
        ..., alias="dayFirstOfInstallment", description="Due date of the first installment"
    )
    number_of_installments: int = Field(..., ge=1, le=MAX_NUMBER_OF_INSTALLMENTS)
    customer_id: int = Field(..., description="Owning customer ID")

    @field_validator("day_first_installment")
    @classmethod
    def validate_future_date(cls, v: date, info: ValidationInfo) -> date:
        clock = (info.context or {}).get("today", date.today)
        if v <= clock():
            raise ValueError("must be a future date")
        return v

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_installment,
            number_of_installments=self.number_of_installments,
            customer=Customer(id=self.customer_id),
        )


class CreditResponse(CamelModel):
    """Credit detail response schema."""

    credit_code: UUID
    credit_value: Decimal
    number_of_installments: int
    status: CreditStatus
    email_customer: str | None = None
    income_customer: Decimal | None = None

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditResponse":
        customer = credit.customer
        return cls(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
            status=credit.status,
            email_customer=customer.email if customer else None,
            income_customer=customer.income if customer else None,
        )


class CreditSummaryResponse(CamelModel):
    """Credit list item response schema."""

    credit_code: UUID
    credit_value: Decimal
    number_of_installments: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditSummaryResponse":
        return cls(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
        )


__all__ = [
    "CustomerCreateRequest",
    "CustomerUpdateRequest",
    "CustomerResponse",
    "CreditCreateRequest",
    "CreditResponse",
    "CreditSummaryResponse",
]
