"""Interactive customer database session.

Usage:
    customer-db

The session owns one ``CustomerService`` over a fresh in-memory
repository, shows the menu, reads a choice and dispatches to the matching
use-case until the operator quits.  Domain exceptions are caught here and
reported as ``Error: ...`` lines; the loop never swallows generic
exceptions.
"""

from __future__ import annotations

import uuid
from typing import Callable, Dict, List

import structlog
import typer

from config.settings import APP_TITLE, configure_logging
from modules.customers.dtos import CreateCustomerDTO, Outcome, UpdateCustomerDTO
from modules.customers.exceptions import CustomerError, InvalidCustomerId
from modules.customers.models import Customer
from modules.customers.repositories import CustomerMemoryRepository
from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)

app = typer.Typer(add_completion=False)

MENU = """
--- Customer Database ---
1. Add Customer
2. View Customer
3. View All Customers
4. Remove Customer
5. Edit Customer
6. Quit"""

QUIT = "6"


def parse_customer_id(raw: str) -> int:
    """Turn operator text into a customer ID.

    Raises:
        InvalidCustomerId: for anything that is not a non-negative integer.
    """
    text = raw.strip()
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidCustomerId(raw)
    return int(digits)


class TerminalInput:
    """Reads one trimmed line of operator input per prompt."""

    def ask(self, prompt: str) -> str:
        return typer.prompt(prompt, default="", show_default=False).strip()

    def confirm(self, prompt: str) -> bool:
        return self.ask(prompt).lower() == "y"


class CustomerSession:
    """Menu loop over a single, session-owned ``CustomerService``."""

    def __init__(self, service: CustomerService, terminal: TerminalInput) -> None:
        self._service = service
        self._terminal = terminal
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.add_customer,
            "2": self.view_customer,
            "3": self.view_customers,
            "4": self.remove_customer,
            "5": self.edit_customer,
        }

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @staticmethod
    def _show(customers: List[Customer]) -> None:
        typer.echo(f"Total customers: {len(customers)}")
        typer.echo()
        for customer in customers:
            typer.echo(str(customer))

    def _ask_id(self, prompt: str) -> int:
        return parse_customer_id(self._terminal.ask(prompt))

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_customer(self) -> None:
        typer.echo("\n--- Add New Customer ---")
        name = self._terminal.ask("Enter customer name")
        self._service.check_name(name)
        email = self._terminal.ask("Enter customer email")
        self._service.check_email(email)
        phone = self._terminal.ask("Enter customer phone")

        customer = self._service.create_customer(
            CreateCustomerDTO(name=name, email=email, phone=phone)
        )
        typer.echo(f"Customer added successfully with ID: {customer.id}")

    def view_customer(self) -> None:
        typer.echo("\n--- View Customer ---")
        if not self._service.count():
            typer.echo("No customers found.")
            return

        customer = self._service.get_customer(self._ask_id("Enter customer ID to view"))
        typer.echo("Customer details:")
        typer.echo(str(customer))

    def view_customers(self) -> None:
        typer.echo("\n--- All Customers ---")
        customers = self._service.list_customers()
        if not customers:
            typer.echo("No customers found.")
            return
        self._show(customers)

    def remove_customer(self) -> None:
        typer.echo("\n--- Remove Customer ---")
        customers = self._service.list_customers()
        if not customers:
            typer.echo("No customers to remove.")
            return
        self._show(customers)

        pending = self._service.stage_removal(
            self._ask_id("Enter customer ID to remove")
        )
        typer.echo("Customer to remove:")
        typer.echo(str(pending.original))

        confirmed = self._terminal.confirm("Are you sure? (y/n)")
        if self._service.commit(pending, confirmed) is Outcome.APPLIED:
            typer.echo("Customer removed successfully!")
        else:
            typer.echo("Remove cancelled.")

    def edit_customer(self) -> None:
        typer.echo("\n--- Edit Customer ---")
        customers = self._service.list_customers()
        if not customers:
            typer.echo("No customers to edit.")
            return
        self._show(customers)

        current = self._service.get_customer(self._ask_id("Enter customer ID to edit"))
        typer.echo("Current customer details:")
        typer.echo(str(current))

        typer.echo(f"\nCurrent name: {current.name}")
        name = self._terminal.ask("Enter new name (press Enter to keep current)")
        typer.echo(f"Current email: {current.email}")
        email = self._terminal.ask("Enter new email (press Enter to keep current)")
        if email:
            self._service.check_email(email, customer_id=current.id)
        typer.echo(f"Current phone: {current.phone}")
        phone = self._terminal.ask("Enter new phone (press Enter to keep current)")

        pending = self._service.stage_update(
            current.id, UpdateCustomerDTO(name=name, email=email, phone=phone)
        )

        typer.echo("\n--- Review Changes ---")
        typer.echo("Original:")
        typer.echo(str(pending.original))
        typer.echo("Updated:")
        typer.echo(str(pending.candidate))

        confirmed = self._terminal.confirm("\nSave changes? (y/n)")
        if self._service.commit(pending, confirmed) is Outcome.APPLIED:
            typer.echo("Customer updated successfully!")
        else:
            typer.echo("Edit cancelled. No changes made.")

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def dispatch(self, choice: str) -> None:
        """Run one menu action, reporting domain errors to the operator."""
        action = self._actions.get(choice)
        if action is None:
            logger.info("session.invalid_choice", choice=choice)
            typer.echo("Invalid choice! Please try again.")
            return
        try:
            action()
        except CustomerError as exc:
            typer.echo(f"Error: {exc}")

    def run(self) -> None:
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(session_id=str(uuid.uuid4()))
        logger.info("session.started")

        typer.echo(f"Welcome to {APP_TITLE}!")
        while True:
            typer.echo(MENU)
            choice = self._terminal.ask("Choose option")
            if choice == QUIT:
                typer.echo("Goodbye!")
                break
            self.dispatch(choice)

        logger.info("session.finished", customers=self._service.count())


@app.command()
def main() -> None:
    """Run the interactive customer database."""
    configure_logging()
    service = CustomerService(repository=CustomerMemoryRepository())
    CustomerSession(service, TerminalInput()).run()


if __name__ == "__main__":
    app()
