"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The session loop (CLI) catches these, reports the message to the
operator and carries on with the next menu choice.
"""

from __future__ import annotations


class CustomerError(Exception):
    """Base class for every recoverable customer-store error."""


class EmptyField(CustomerError):
    """A required text field (name or phone) was left blank."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field.capitalize()} cannot be empty!")


class InvalidEmail(CustomerError):
    """The email address is blank or has no ``@``."""

    def __init__(self, message: str = "Please enter a valid email!") -> None:
        super().__init__(message)


class DuplicateEmail(CustomerError):
    """Another stored customer already uses this exact email."""


class CustomerNotFound(CustomerError):
    """No customer is stored under the requested ID."""

    def __init__(self, customer_id: int) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer with ID {customer_id} not found!")


class InvalidCustomerId(CustomerError):
    """Operator input could not be parsed as a customer ID."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("Please enter a valid number!")
