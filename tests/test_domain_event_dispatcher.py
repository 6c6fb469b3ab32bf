"""Domain event dispatcher: delivering pending entity events.

Tests cover:
    - Sync and async handlers, subclass matching
    - dispatch_pending preserves raise order and clears entities
    - A failing handler propagates and leaves events pending
"""

import pytest

from buildingblocks.domain.events.domain_event import DomainEvent
from buildingblocks.exceptions import ArgumentInvalidError
from buildingblocks.services.domain_event_dispatcher import DomainEventDispatcher
from sample_domain import Customer, CustomerRegistered, CustomerRenamed


@pytest.mark.asyncio
async def test_dispatch_calls_sync_and_async_handlers():
    seen = []

    async def async_handler(event):
        seen.append(("async", event.name))

    dispatcher = DomainEventDispatcher()
    dispatcher.register(CustomerRegistered, lambda e: seen.append(("sync", e.name)))
    dispatcher.register(CustomerRegistered, async_handler)

    count = await dispatcher.dispatch(CustomerRegistered("Ada"))

    assert count == 2
    assert seen == [("sync", "Ada"), ("async", "Ada")]


@pytest.mark.asyncio
async def test_base_class_handler_receives_every_event():
    seen = []
    dispatcher = DomainEventDispatcher()
    dispatcher.register(DomainEvent, seen.append)

    await dispatcher.dispatch(CustomerRegistered("Ada"))
    await dispatcher.dispatch(CustomerRenamed("Ada", "Grace"))

    assert [e.event_type for e in seen] == ["CustomerRegistered", "CustomerRenamed"]


@pytest.mark.asyncio
async def test_dispatch_without_handlers_returns_zero():
    assert await DomainEventDispatcher().dispatch(CustomerRegistered("Ada")) == 0


@pytest.mark.asyncio
async def test_dispatch_pending_preserves_order_and_clears():
    seen = []
    dispatcher = DomainEventDispatcher()
    dispatcher.register(DomainEvent, seen.append)
    first, second = Customer("Ada"), Customer("Grace")
    first.rename("Ada L.")

    dispatched = await dispatcher.dispatch_pending(first, second)

    assert dispatched == 3
    assert [type(e).__name__ for e in seen] == ["CustomerRegistered", "CustomerRenamed", "CustomerRegistered"]
    assert first.domain_events == ()
    assert second.domain_events == ()


@pytest.mark.asyncio
async def test_failing_handler_keeps_events_pending():
    def explode(event):
        raise RuntimeError("handler down")

    dispatcher = DomainEventDispatcher()
    dispatcher.register(CustomerRenamed, explode)
    customer = Customer("Ada")
    customer.rename("Grace")

    with pytest.raises(RuntimeError):
        await dispatcher.dispatch_pending(customer)

    assert len(customer.domain_events) == 2


def test_register_rejects_non_event_types():
    dispatcher = DomainEventDispatcher()
    with pytest.raises(ArgumentInvalidError):
        dispatcher.register(str, print)
