"""Integration tests driving the interactive session through typer's CliRunner.

Each test scripts the operator's keystrokes as newline-separated input and
asserts on what the session prints.
"""

from __future__ import annotations

import uuid

import pytest
import structlog
from structlog.testing import capture_logs

from modules.customers import cli
from modules.customers.cli import app, parse_customer_id
from modules.customers.exceptions import InvalidCustomerId

pytestmark = pytest.mark.integration

ALICE = ["1", "Alice", "a@x.com", "111"]
BOB = ["1", "Bob", "b@x.com", "222"]


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    """Keep the global logging setup out of the test process and log lines
    out of the captured terminal output."""
    monkeypatch.setattr(cli, "configure_logging", lambda: None)
    with capture_logs():
        yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture()
def run(cli_runner):
    """Play the scripted keystrokes, then quit, and return the output."""

    def _run(*steps):
        keys = [key for step in steps for key in (step if isinstance(step, list) else [step])]
        result = cli_runner.invoke(app, [], input="\n".join([*keys, "6"]) + "\n")
        assert result.exit_code == 0, result.output
        return result.output

    return _run


# ===========================================================================
# parse_customer_id
# ===========================================================================


class TestParseCustomerId:
    def test_parses_digits(self):
        assert parse_customer_id(" 12 ") == 12

    def test_accepts_leading_plus(self):
        assert parse_customer_id("+5") == 5

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "-3", "1_0", "\u0663", "+"])
    def test_rejects_non_ids(self, raw):
        with pytest.raises(InvalidCustomerId, match="valid number"):
            parse_customer_id(raw)


# ===========================================================================
# Menu loop
# ===========================================================================


class TestMenu:
    def test_welcome_and_goodbye(self, run):
        output = run()
        assert "Welcome to" in output
        assert "1. Add Customer" in output
        assert output.rstrip().endswith("Goodbye!")

    def test_invalid_choice_reprompts(self, run):
        output = run("9")
        assert "Invalid choice! Please try again." in output
        assert output.count("--- Customer Database ---") == 2

    def test_binds_session_id(self, run):
        run()
        session_id = structlog.contextvars.get_contextvars()["session_id"]
        assert str(uuid.UUID(session_id)) == session_id


class TestAdd:
    def test_adds_customer(self, run):
        output = run(ALICE, BOB)
        assert "Customer added successfully with ID: 1" in output
        assert "Customer added successfully with ID: 2" in output

    def test_empty_name_reported(self, run):
        output = run(["1", ""], "3")
        assert "Error: Name cannot be empty!" in output
        assert "No customers found." in output
        assert "Enter customer email" not in output

    def test_invalid_email_reported(self, run):
        output = run(["1", "Alice", "nope"])
        assert "Error: Please enter a valid email!" in output
        assert "Enter customer phone" not in output

    def test_duplicate_email_reported(self, run):
        output = run(ALICE, ["1", "Other", "a@x.com"])
        assert "Error: Customer with this email already exists!" in output


class TestView:
    def test_view_one(self, run):
        output = run(ALICE, ["2", "1"])
        assert "Customer details:" in output
        assert "ID: 1 | Name: Alice | Email: a@x.com | Phone: 111" in output

    def test_view_one_empty_store(self, run):
        output = run("2")
        assert "No customers found." in output

    def test_view_one_bad_id(self, run):
        output = run(ALICE, ["2", "abc"])
        assert "Error: Please enter a valid number!" in output

    def test_view_one_missing(self, run):
        output = run(ALICE, ["2", "7"])
        assert "Error: Customer with ID 7 not found!" in output

    def test_view_all_sorted(self, run):
        output = run(ALICE, BOB, "3")
        assert "Total customers: 2" in output
        assert output.index("ID: 1 | Name: Alice") < output.index("ID: 2 | Name: Bob")


class TestRemove:
    def test_confirmed(self, run):
        output = run(ALICE, BOB, ["4", "1", "y"], "3")
        assert "Customer to remove:" in output
        assert "Customer removed successfully!" in output
        assert "Total customers: 1" in output

    def test_declined(self, run):
        output = run(ALICE, ["4", "1", "n"], "3")
        assert "Remove cancelled." in output
        assert "Total customers: 1" in output

    def test_uppercase_y_confirms(self, run):
        output = run(ALICE, ["4", "1", "Y"])
        assert "Customer removed successfully!" in output

    def test_empty_store(self, run):
        output = run("4")
        assert "No customers to remove." in output

    def test_ids_not_reused(self, run):
        output = run(ALICE, BOB, ["4", "1", "y"], ["1", "Carol", "c@x.com", "333"])
        assert "Customer added successfully with ID: 3" in output


class TestEdit:
    def test_confirmed_change(self, run):
        output = run(ALICE, ["5", "1", "Alicia", "", "999", "y"], ["2", "1"])
        assert "--- Review Changes ---" in output
        assert "Customer updated successfully!" in output
        assert "ID: 1 | Name: Alicia | Email: a@x.com | Phone: 999" in output

    def test_declined_change(self, run):
        output = run(ALICE, ["5", "1", "Alicia", "", "", "n"], ["2", "1"])
        assert "Edit cancelled. No changes made." in output
        assert "Name: Alicia" not in output.split("Edit cancelled.")[1]

    def test_duplicate_email_reported(self, run):
        output = run(ALICE, BOB, ["5", "2", "", "a@x.com"])
        assert "Error: Another customer with this email already exists!" in output
        assert "Customer updated successfully!" not in output
        assert "Enter new phone" not in output

    def test_empty_store(self, run):
        output = run("5")
        assert "No customers to edit." in output
