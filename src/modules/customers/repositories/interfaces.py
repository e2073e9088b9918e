"""Customer repository interface.

Extends ``IRepository[Customer]`` with the email look-up required by
the unique-email rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(self) -> List[Customer]:
        """List customers sorted ascending by ID."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by exact (case-sensitive) email."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored customers."""
