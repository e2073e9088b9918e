"""Unit tests for Customer DTOs.

Covers:
- CreateCustomerDTO: whitespace trimming, frozen immutability.
- UpdateCustomerDTO: blank input normalised to "keep current".
- PendingChange: customer_id shortcut.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.customers.dtos import (
    ChangeKind,
    CreateCustomerDTO,
    PendingChange,
    UpdateCustomerDTO,
)
from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestCreateCustomerDTO:
    def test_strips_whitespace(self):
        dto = CreateCustomerDTO(name="  Alice ", email=" a@x.com", phone="111  ")
        assert dto.name == "Alice"
        assert dto.email == "a@x.com"
        assert dto.phone == "111"

    def test_blank_fields_allowed(self):
        """Blank values are a business rule, reported by the service."""
        dto = CreateCustomerDTO(name="", email="", phone="")
        assert dto.name == ""

    def test_is_frozen(self):
        dto = CreateCustomerDTO(name="Alice", email="a@x.com", phone="111")
        with pytest.raises(ValidationError):
            dto.name = "Bob"


class TestUpdateCustomerDTO:
    def test_defaults_to_no_changes(self):
        dto = UpdateCustomerDTO()
        assert dto.is_empty()

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_blank_means_keep(self, blank):
        dto = UpdateCustomerDTO(name=blank, email=blank, phone=blank)
        assert dto.name is None
        assert dto.email is None
        assert dto.phone is None
        assert dto.is_empty()

    def test_values_are_trimmed(self):
        dto = UpdateCustomerDTO(email="  new@x.com ")
        assert dto.email == "new@x.com"
        assert not dto.is_empty()

    def test_is_frozen(self):
        dto = UpdateCustomerDTO(name="Alice")
        with pytest.raises(ValidationError):
            dto.name = "Bob"


class TestPendingChange:
    def test_customer_id_comes_from_original(self):
        original = Customer(id=4, name="Alice", email="a@x.com", phone="111")
        pending = PendingChange(kind=ChangeKind.REMOVE, original=original)
        assert pending.customer_id == 4
        assert pending.candidate is None


class TestCustomerDisplay:
    def test_str_format(self):
        customer = Customer(id=2, name="Bob", email="b@x.com", phone="222")
        assert str(customer) == "ID: 2 | Name: Bob | Email: b@x.com | Phone: 222"
