import pytest

from modules.customers.repositories import CustomerMemoryRepository
from modules.customers.services import CustomerService


@pytest.fixture()
def repo():
    """Fresh, empty in-memory repository."""
    return CustomerMemoryRepository()


@pytest.fixture()
def service(repo):
    """CustomerService wired to the in-memory repository."""
    return CustomerService(repository=repo)


@pytest.fixture()
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
