"""Shared BDD fixtures and step definitions for the order/payment lifecycle."""

import pytest
from marketplace.order.order import Order
from marketplace.payment.payment import Payment
from marketplace.shop.opening import CreateShop
from marketplace.user.registration import RegisterUser
from protean import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def context():
    """Ids and observations collected while a scenario runs."""
    return {"order_id": None, "statuses": []}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered buyer", target_fixture="buyer")
def registered_buyer():
    return current_domain.process(
        RegisterUser(name="Minji Kim", email="minji@example.com"),
        asynchronous=False,
    )


@given("an open shop", target_fixture="shop")
def open_shop():
    return current_domain.process(
        CreateShop(name="Corner Cafe", category="CAFE"),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is "{status}"'))
def order_has_status(context, status):
    order = current_domain.repository_for(Order).get(context["order_id"])
    assert order.status == status


@then(parsers.cfparse('the payment is "{status}"'))
def payment_has_status(context, status):
    payment = current_domain.repository_for(Payment).for_order(context["order_id"])
    assert payment.status == status


@then(parsers.cfparse('the action fails with "{message}"'))
def action_failed(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])
