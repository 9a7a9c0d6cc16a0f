"""
Unit tests for the credit API schemas (validation and entity mapping).
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.domains.credit.api.schemas import (
    CreditCreateRequest,
    CreditResponse,
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from app.domains.credit.domain import CreditStatus


@pytest.mark.unit
def test_customer_create_request_to_entity(customer_payload):
    request = CustomerCreateRequest(**customer_payload)

    customer = request.to_entity()

    assert customer.id is None
    assert customer.first_name == "Tomás Calebe"
    assert customer.income == Decimal("1000.0")
    assert customer.address.zip_code == "04880-033"
    assert customer.password == "JuIzRXHe1u"


@pytest.mark.unit
@pytest.mark.parametrize(
    "field,value",
    [
        ("firstName", "   "),
        ("cpf", ""),
        ("cpf", "517.429.568-00"),
        ("cpf", "111.111.111-11"),
        ("cpf", "5174295680"),
        ("email", "not-an-email"),
        ("income", "-1"),
        ("street", ""),
    ],
)
def test_customer_create_request_rejects_invalid_field(customer_payload, field, value):
    customer_payload[field] = value

    with pytest.raises(ValidationError) as exc_info:
        CustomerCreateRequest(**customer_payload)

    assert exc_info.value.errors()[0]["loc"] == (field,)


@pytest.mark.unit
def test_customer_create_request_formats_bare_cpf_digits(customer_payload):
    customer_payload["cpf"] = "51742956807"

    assert CustomerCreateRequest(**customer_payload).cpf == "517.429.568-07"


@pytest.mark.unit
def test_customer_update_request_only_set_fields():
    request = CustomerUpdateRequest(first_name="Cami", income="5000.0")

    changes = request.to_changes()

    assert changes.changed_fields() == {"first_name": "Cami", "income": Decimal("5000.0")}


@pytest.mark.unit
def test_customer_response_hides_password(sample_customer):
    sample_customer.id = 1

    body = CustomerResponse.from_entity(sample_customer).model_dump()

    assert "password" not in body
    assert body["id"] == 1
    assert body["street"].startswith("Travessa Renascer")


@pytest.mark.unit
def test_credit_create_request_to_entity():
    request = CreditCreateRequest(
        credit_value="500.0",
        day_first_installment=date.today() + timedelta(days=10),
        number_of_installments=12,
        customer_id=3,
    )

    credit = request.to_entity()

    assert credit.customer_id == 3
    assert credit.status == CreditStatus.IN_PROGRESS
    assert credit.credit_code is not None


@pytest.mark.unit
@pytest.mark.parametrize("days", [0, -1])
def test_credit_create_request_requires_future_date(days):
    with pytest.raises(ValidationError) as exc_info:
        CreditCreateRequest.model_validate(
            {
                "creditValue": "500.0",
                "dayFirstOfInstallment": (date.today() + timedelta(days=days)).isoformat(),
                "numberOfInstallments": 12,
                "customerId": 1,
            }
        )

    error = exc_info.value.errors()[0]
    assert error["loc"] == ("dayFirstOfInstallment",)
    assert str(error["ctx"]["error"]) == "must be a future date"


@pytest.mark.unit
def test_credit_create_request_uses_clock_from_context():
    body = {
        "creditValue": "500.0",
        "dayFirstOfInstallment": "2024-01-10",
        "numberOfInstallments": 12,
        "customerId": 1,
    }

    request = CreditCreateRequest.model_validate(body, context={"today": lambda: date(2024, 1, 9)})

    assert request.day_first_installment == date(2024, 1, 10)
    with pytest.raises(ValidationError):
        CreditCreateRequest.model_validate(body, context={"today": lambda: date(2024, 1, 10)})


@pytest.mark.unit
@pytest.mark.parametrize("installments", [0, 49])
def test_credit_create_request_installments_bounds(installments):
    with pytest.raises(ValidationError):
        CreditCreateRequest(
            credit_value="500.0",
            day_first_installment=date.today() + timedelta(days=10),
            number_of_installments=installments,
            customer_id=1,
        )


@pytest.mark.unit
def test_credit_response_carries_customer_data(sample_credit):
    response = CreditResponse.from_entity(sample_credit)

    assert response.email_customer == "tomas_farias@camarasjc.sp.gov.br"
    assert response.income_customer == Decimal("1000.0")
    assert response.number_of_installments == 24
    assert response.status == CreditStatus.IN_PROGRESS


@pytest.mark.unit
def test_responses_serialize_camel_case(sample_credit):
    sample_credit.customer.id = 1

    customer_body = CustomerResponse.from_entity(sample_credit.customer).model_dump(by_alias=True)
    credit_body = CreditResponse.from_entity(sample_credit).model_dump(by_alias=True)

    assert {"firstName", "lastName", "zipCode"} <= set(customer_body)
    assert set(credit_body) == {
        "creditCode",
        "creditValue",
        "numberOfInstallments",
        "status",
        "emailCustomer",
        "incomeCustomer",
    }
