import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture()
def store():
    from ordering.domain import ordering
    from ordering.order.store import OrderStore

    return OrderStore(ordering)


@pytest.fixture()
def service(store):
    from ordering.order.service import OrderService

    return OrderService(store)


class FrozenClock:
    """Stand-in for `datetime` in the aggregate modules; `now()` returns `instant`."""

    def __init__(self, instant):
        self.instant = instant

    def now(self, tz=None):
        return self.instant


@pytest.fixture()
def frozen_clock(monkeypatch):
    from datetime import UTC, datetime

    clock = FrozenClock(datetime(2031, 5, 17, 9, 30, tzinfo=UTC))
    monkeypatch.setattr("ordering.order.order.datetime", clock)
    monkeypatch.setattr("ordering.order.line_item.datetime", clock)
    return clock
