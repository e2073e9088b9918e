"""In-memory implementation of the Customer repository.

Holds the whole store for one session: a ``dict`` keyed by customer ID
plus the next-ID counter.  Nothing survives the process.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to report a
missing customer.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional

import structlog

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerMemoryRepository(ICustomerRepository):
    """Concrete Customer repository backed by a ``dict``.

    IDs start at 1 and are never reused: the counter only moves forward,
    even after deletions.
    """

    def __init__(self) -> None:
        self._customers: Dict[int, Customer] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, id: int) -> Optional[Customer]:
        return self._customers.get(id)

    def list(self) -> List[Customer]:
        return [self._customers[key] for key in sorted(self._customers)]

    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer.

        An entity without an ID is new and gets the next one; an entity
        with an ID replaces the stored record under that key.
        """
        is_new = entity.id is None
        if is_new:
            entity = replace(entity, id=self._next_id)
            self._next_id += 1
        self._customers[entity.id] = entity
        logger.debug("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    def delete(self, id: int) -> bool:
        """Delete a customer by ID.

        Returns ``True`` if the customer was found and removed,
        ``False`` if no customer exists with the given ID.
        """
        if self._customers.pop(id, None) is None:
            return False
        logger.debug("customer.removed", customer_id=id)
        return True

    def get_by_email(self, email: str) -> Optional[Customer]:
        for customer in self._customers.values():
            if customer.email == email:
                return customer
        return None

    def count(self) -> int:
        return len(self._customers)
