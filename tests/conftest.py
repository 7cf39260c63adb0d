"""Shared fixtures for the opensplit test suite."""

from collections import Counter

import pytest

from opensplit.models import Expense, Group


def make_expense(payer, receivers, amount, name=""):
    return Expense(name=name, amount=amount, payer=payer, receivers=list(receivers))


def as_multiset(exchanges):
    """Exchanges compared regardless of order."""
    return Counter((e.payer, e.receiver, e.amount) for e in exchanges)


def replay(exchanges):
    """Balance change caused by carrying out the exchanges."""
    balances = {}
    for exchange in exchanges:
        balances[exchange.payer] = balances.get(exchange.payer, 0.0) + exchange.amount
        balances[exchange.receiver] = balances.get(exchange.receiver, 0.0) - exchange.amount
    return balances


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------

@pytest.fixture
def dinner_group() -> Group:
    """A pays 30 split between A, B and C."""
    return Group(
        id="g-dinner",
        name="Dinner",
        expenses=[make_expense("A", ["A", "B", "C"], 30.0, name="dinner")],
    )


@pytest.fixture
def even_group() -> Group:
    """A and B pay for each other, nobody owes anything."""
    return Group(
        id="g-even",
        name="Even",
        expenses=[
            make_expense("A", ["B"], 10.0, name="taxi"),
            make_expense("B", ["A"], 10.0, name="coffee"),
        ],
    )


@pytest.fixture
def cycle_group() -> Group:
    """A pays for B, B pays for C, C pays for A."""
    return Group(
        id="g-cycle",
        name="Cycle",
        expenses=[
            make_expense("A", ["B"], 10.0),
            make_expense("B", ["C"], 10.0),
            make_expense("C", ["A"], 10.0),
        ],
    )


@pytest.fixture
def chain_group() -> Group:
    """A pays for B and B pays the same for C, so C could pay A directly."""
    return Group(
        id="g-chain",
        name="Chain",
        expenses=[
            make_expense("A", ["B"], 10.0),
            make_expense("B", ["C"], 10.0),
        ],
    )
