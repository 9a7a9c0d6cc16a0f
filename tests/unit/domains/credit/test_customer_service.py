"""
Unit tests for CustomerService.

Tests:
- save
- find_by_id
- update
- delete
"""

from decimal import Decimal

import pytest

from app.core.domain import Address, BusinessException, DuplicateEntityException
from app.domains.credit.application.dto import CustomerUpdateData
from app.domains.credit.application.services import CustomerService


def _persisted(customer, customer_id: int = 1):
    customer.id = customer_id
    return customer


# ============================================================================
# save
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_save_returns_customer_with_assigned_id(mock_customer_repository, sample_customer):
    """Test registering a customer returns the stored entity."""
    # Arrange
    mock_customer_repository.save.side_effect = lambda c: _persisted(c, 1)
    service = CustomerService(customer_repository=mock_customer_repository)

    # Act
    saved = await service.save(sample_customer)

    # Assert
    assert saved.id == 1
    assert saved.cpf == "517.429.568-07"
    mock_customer_repository.save.assert_awaited_once_with(sample_customer)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_save_propagates_duplicate(mock_customer_repository, sample_customer):
    """Test uniqueness conflicts surface unchanged."""
    mock_customer_repository.save.side_effect = DuplicateEntityException("Customer", ["cpf"])
    service = CustomerService(customer_repository=mock_customer_repository)

    with pytest.raises(DuplicateEntityException) as exc_info:
        await service.save(sample_customer)

    assert exc_info.value.fields == ["cpf"]


# ============================================================================
# find_by_id
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_find_by_id_returns_customer(mock_customer_repository, sample_customer):
    """Test getting an existing customer."""
    mock_customer_repository.find_by_id.return_value = _persisted(sample_customer, 7)
    service = CustomerService(customer_repository=mock_customer_repository)

    found = await service.find_by_id(7)

    assert found is sample_customer
    mock_customer_repository.find_by_id.assert_awaited_once_with(7)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
@pytest.mark.parametrize("customer_id", [2, 1000, -1])
async def test_find_by_id_not_found(mock_customer_repository, customer_id):
    """Test any missing id fails with the id in the message."""
    mock_customer_repository.find_by_id.return_value = None
    service = CustomerService(customer_repository=mock_customer_repository)

    with pytest.raises(BusinessException) as exc_info:
        await service.find_by_id(customer_id)

    assert exc_info.value.message == f"Id {customer_id} not found"


# ============================================================================
# update
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_changes_only_given_fields(mock_customer_repository, sample_customer):
    """Test partial update leaves cpf, email and unset fields alone."""
    # Arrange
    mock_customer_repository.find_by_id.return_value = _persisted(sample_customer, 1)
    mock_customer_repository.save.side_effect = lambda c: c
    service = CustomerService(customer_repository=mock_customer_repository)
    changes = CustomerUpdateData(first_name="Cami", income=Decimal("5000.0"), street="Rua Updated")

    # Act
    updated = await service.update(1, changes)

    # Assert
    assert updated.first_name == "Cami"
    assert updated.last_name == "Farias"
    assert updated.income == Decimal("5000.0")
    assert updated.address == Address(zip_code="04880-033", street="Rua Updated")
    assert updated.cpf == "517.429.568-07"
    assert updated.email == "tomas_farias@camarasjc.sp.gov.br"
    mock_customer_repository.save.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_unknown_customer_does_not_save(mock_customer_repository):
    """Test updating a missing customer fails before any write."""
    service = CustomerService(customer_repository=mock_customer_repository)

    with pytest.raises(BusinessException, match="Id 99 not found"):
        await service.update(99, CustomerUpdateData(first_name="X"))

    mock_customer_repository.save.assert_not_awaited()


# ============================================================================
# delete
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_existing_customer(mock_customer_repository, sample_customer):
    """Test deleting loads the customer and hands it to the repository."""
    mock_customer_repository.find_by_id.return_value = _persisted(sample_customer, 3)
    service = CustomerService(customer_repository=mock_customer_repository)

    await service.delete(3)

    mock_customer_repository.delete.assert_awaited_once_with(sample_customer)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_unknown_customer(mock_customer_repository):
    """Test deleting a missing customer fails and deletes nothing."""
    service = CustomerService(customer_repository=mock_customer_repository)

    with pytest.raises(BusinessException, match="Id 5 not found"):
        await service.delete(5)

    mock_customer_repository.delete.assert_not_awaited()
