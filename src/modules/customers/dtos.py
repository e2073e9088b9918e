"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the session loop (CLI) and the
Service layer.  DTOs are immutable (``frozen=True``) and strip
surrounding whitespace from every text field.

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for an edit; blank fields mean "keep".
- ``PendingChange``: a staged edit or removal awaiting confirmation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.customers.models import Customer

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Outcome(StrEnum):
    """Result of a confirm-gated operation."""

    APPLIED = "applied"
    CANCELLED = "cancelled"


class ChangeKind(StrEnum):
    UPDATE = "update"
    REMOVE = "remove"


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation.

    No business validation happens here: empty names, malformed emails
    and duplicates are reported by ``CustomerService`` as domain errors.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = ""
    email: str = ""
    phone: str = ""


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer edits.

    All fields are optional.  A blank value is normalised to ``None``,
    so "operator pressed Enter" and "field not supplied" are the same
    thing: keep the current value.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name", "email", "phone")
    @classmethod
    def blank_as_missing(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.phone is None


# ---------------------------------------------------------------------------
# Staged changes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PendingChange:
    """A validated change that has not been committed yet.

    ``candidate`` is the full replacement record for an update and
    ``None`` for a removal.
    """

    kind: ChangeKind
    original: Customer
    candidate: Optional[Customer] = None

    @property
    def customer_id(self) -> int:
        return self.original.id
