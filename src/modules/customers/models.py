"""Customer entity.

A ``Customer`` is an immutable value: edits build a new instance with
``dataclasses.replace`` and the repository swaps it in under the same ID.
``id`` is ``None`` until the repository assigns one on first save.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """Customer record held by the in-memory store."""

    name: str
    email: str
    phone: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return (
            f"ID: {self.id} | Name: {self.name} | "
            f"Email: {self.email} | Phone: {self.phone}"
        )
