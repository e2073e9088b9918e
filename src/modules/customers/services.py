"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
storage to the injected ``ICustomerRepository``.

Business rules enforced here:
- Name and phone must not be blank.
- Email must contain ``@`` and be unique (exact, case-sensitive match).
- Edits and removals are confirm-gated: they are staged first and only
  applied when the operator confirms.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.customers.dtos import ChangeKind, Outcome, PendingChange
from modules.customers.exceptions import (
    CustomerNotFound,
    DuplicateEmail,
    EmptyField,
    InvalidEmail,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Field checks
    # ------------------------------------------------------------------

    def check_name(self, name: str) -> None:
        """Raise ``EmptyField`` for a blank name."""
        if not name:
            logger.warning("customer.empty_field", field="name")
            raise EmptyField("name")

    def check_email(self, email: str, customer_id: Optional[int] = None) -> None:
        """Raise unless ``email`` is well formed and free for ``customer_id``."""
        if not email or "@" not in email:
            logger.warning("customer.invalid_email", customer_id=customer_id)
            raise InvalidEmail()

        existing = self._repo.get_by_email(email)
        if existing is not None and existing.id != customer_id:
            logger.warning(
                "customer.duplicate_email",
                customer_id=customer_id,
                existing_id=existing.id,
            )
            if customer_id is None:
                raise DuplicateEmail("Customer with this email already exists!")
            raise DuplicateEmail("Another customer with this email already exists!")

    def _require(self, id: int) -> Customer:
        customer = self._repo.get_by_id(id)
        if customer is None:
            raise CustomerNotFound(id)
        return customer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing field and uniqueness rules.

        Raises:
            EmptyField: if name or phone is blank.
            InvalidEmail: if email is blank or has no ``@``.
            DuplicateEmail: if email is already taken.
        """
        self.check_name(dto.name)
        self.check_email(dto.email)

        if not dto.phone:
            logger.warning("customer.empty_field", field="phone")
            raise EmptyField("phone")

        customer = self._repo.save(
            Customer(name=dto.name, email=dto.email, phone=dto.phone)
        )
        logger.info("customer.created", customer_id=customer.id)
        return customer

    def stage_update(self, id: int, dto: UpdateCustomerDTO) -> PendingChange:
        """Validate an edit and build the full replacement record.

        Nothing is written; pass the result to :meth:`commit`.

        Raises:
            CustomerNotFound: if the customer does not exist.
            InvalidEmail: if a new email has no ``@``.
            DuplicateEmail: if a new email belongs to another customer.
        """
        original = self._require(id)
        if dto.is_empty():
            return PendingChange(
                kind=ChangeKind.UPDATE, original=original, candidate=original
            )

        changes = {}
        if dto.name is not None:
            changes["name"] = dto.name
        if dto.email is not None:
            self.check_email(dto.email, customer_id=id)
            changes["email"] = dto.email
        if dto.phone is not None:
            changes["phone"] = dto.phone

        return PendingChange(
            kind=ChangeKind.UPDATE,
            original=original,
            candidate=replace(original, **changes),
        )

    def stage_removal(self, id: int) -> PendingChange:
        """Select a customer for removal.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        return PendingChange(kind=ChangeKind.REMOVE, original=self._require(id))

    def commit(self, pending: PendingChange, confirmed: bool) -> Outcome:
        """Apply a staged change if ``confirmed``, otherwise discard it.

        The store is re-checked first, so a change staged against a record
        that has since been removed, or whose new email has since been
        taken, is rejected rather than applied.

        Raises:
            CustomerNotFound: if the target no longer exists.
            DuplicateEmail: if the candidate email now belongs to another
                customer.
        """
        log = logger.bind(customer_id=pending.customer_id, change=str(pending.kind))

        self._require(pending.customer_id)

        if not confirmed:
            log.info(f"customer.{pending.kind}_cancelled")
            return Outcome.CANCELLED

        if pending.kind is ChangeKind.REMOVE:
            self._repo.delete(pending.customer_id)
            log.info("customer.deleted")
        else:
            if pending.candidate.email != pending.original.email:
                self.check_email(pending.candidate.email, pending.customer_id)
            self._repo.save(pending.candidate)
            log.info("customer.updated")
        return Outcome.APPLIED

    def update_customer(
        self, id: int, dto: UpdateCustomerDTO, confirmed: bool
    ) -> Outcome:
        """Stage and commit an edit in one call."""
        return self.commit(self.stage_update(id, dto), confirmed)

    def delete_customer(self, id: int, confirmed: bool) -> Outcome:
        """Stage and commit a removal in one call."""
        return self.commit(self.stage_removal(id), confirmed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        """Return every customer sorted ascending by ID."""
        return sorted(self._repo.list(), key=lambda c: c.id)

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._require(id)
        logger.info("customer.retrieved", customer_id=id)
        return customer

    def count(self) -> int:
        return self._repo.count()
