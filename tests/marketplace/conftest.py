import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def marketplace_bed():
    from marketplace.domain import marketplace

    bed = DomainFixture(marketplace)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(marketplace_bed):
    with marketplace_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases and drain the event store
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def _default_gateway():
    from marketplace.gateway import reset_gateway

    reset_gateway()
    yield
    reset_gateway()


@pytest.fixture()
def buyer_id(_ctx):
    """A registered buyer."""
    from marketplace.user.registration import RegisterUser
    from protean import current_domain

    return current_domain.process(
        RegisterUser(name="Minji Kim", email="minji@example.com", phone_number="010-1111-2222"),
        asynchronous=False,
    )


@pytest.fixture()
def shop_id(_ctx):
    """An open shop."""
    from marketplace.shop.opening import CreateShop
    from protean import current_domain

    return current_domain.process(
        CreateShop(name="Corner Cafe", category="CAFE", address="12 Main Street"),
        asynchronous=False,
    )
