import os
from datetime import datetime, timedelta

import pytest


@pytest.fixture(scope="session")
def _customers_domain(request):
    """Initialize the customers domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from customers.domain import customers

    customers.init()
    return customers


@pytest.fixture(autouse=True)
def run_around_tests(_customers_domain):
    """Push domain context before each test, pop it after."""
    ctx = _customers_domain.domain_context()
    ctx.push()

    yield

    ctx.pop()


class TickingClock:
    """Deterministic clock: every call returns one second later than the previous one."""

    def __init__(self, start=datetime(2024, 1, 1, 9, 0, 0)):
        self.current = start

    def __call__(self):
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture()
def clock():
    return TickingClock()


@pytest.fixture()
def address_props():
    return {
        "street": "Rua das Flores, 123",
        "city": "São Paulo",
        "state": "SP",
        "zip_code": "01234567",
        "country": "Brasil",
    }
