"""Customer repositories package."""

from modules.customers.repositories.interfaces import ICustomerRepository
from modules.customers.repositories.memory_repository import CustomerMemoryRepository

__all__ = ["CustomerMemoryRepository", "ICustomerRepository"]
