"""BaseEntity: identity, audit metadata and pending domain events.

Tests cover:
    - Fresh, unique, non-empty identifiers
    - set_created / set_modified stamping rules
    - Raise order, read-only view and idempotent clear of domain events
    - Domain event immutability and serialisation
"""

import dataclasses
import time
import uuid
from datetime import timezone

import pytest

from buildingblocks.domain.entities.base_entity import BaseEntity, IHasDomainEvents
from buildingblocks.domain.events.domain_event import DomainEvent
from buildingblocks.utils.uuid_helper import EMPTY_UUID
from sample_domain import Customer, CustomerRegistered, CustomerRenamed


def test_base_entity_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        BaseEntity()


def test_identifiers_are_non_empty_and_unique():
    customers = [Customer(f"customer-{i}") for i in range(50)]
    ids = {c.id for c in customers}
    assert len(ids) == 50
    assert all(isinstance(i, uuid.UUID) and i != EMPTY_UUID for i in ids)


def test_new_entity_audit_defaults():
    customer = Customer("Ada")
    assert customer.created_at.tzinfo == timezone.utc
    assert customer.created_by is None
    assert customer.modified_at is None
    assert customer.modified_by is None


def test_set_modified_only_touches_modification_fields():
    customer = Customer("Ada")
    original_id, original_created = customer.id, customer.created_at

    customer.set_modified("bob")

    assert customer.id == original_id
    assert customer.created_at == original_created
    assert customer.modified_by == "bob"
    assert customer.modified_at is not None
    assert customer.modified_at >= original_created


def test_set_modified_without_actor_clears_modifier():
    customer = Customer("Ada")
    customer.set_modified("bob")
    customer.set_modified()
    assert customer.modified_by is None
    assert customer.modified_at is not None


def test_set_created_restamps_creation():
    customer = Customer("Ada")
    first_created = customer.created_at
    time.sleep(0.001)

    customer.set_created("alice")

    assert customer.created_by == "alice"
    assert customer.created_at > first_created


def test_set_created_accepts_empty_string():
    customer = Customer("Ada")
    customer.set_created("")
    assert customer.created_by == ""


def test_events_are_reported_in_raise_order_then_cleared():
    customer = Customer("Ada")
    customer.clear_domain_events()

    customer.rename("Ada L.")
    customer.rename("Countess")

    events = customer.domain_events
    assert len(events) == 2
    assert [e.new_name for e in events] == ["Ada L.", "Countess"]

    customer.clear_domain_events()
    assert len(customer.domain_events) == 0


def test_clear_is_idempotent():
    customer = Customer("Ada")
    customer.clear_domain_events()
    customer.clear_domain_events()
    assert customer.domain_events == ()


def test_constructor_event_is_pending():
    customer = Customer("Ada")
    (event,) = customer.domain_events
    assert isinstance(event, CustomerRegistered)
    assert event.name == "Ada"


def test_domain_events_view_is_read_only_snapshot():
    customer = Customer("Ada")
    view = customer.domain_events
    assert isinstance(view, tuple)

    customer.rename("Grace")

    assert len(view) == 1
    assert len(customer.domain_events) == 2


def test_entity_satisfies_has_domain_events_protocol():
    assert isinstance(Customer("Ada"), IHasDomainEvents)


def test_entities_compare_by_type_and_id():
    a, b = Customer("Ada"), Customer("Ada")
    assert a != b
    assert a == a
    assert len({a, a, b}) == 2


def test_domain_event_is_immutable_and_timestamped():
    event = CustomerRenamed("Ada", "Grace")
    assert event.occurred_at.tzinfo == timezone.utc
    assert event.event_type == "CustomerRenamed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.new_name = "Other"


def test_domain_event_to_dict():
    event = CustomerRenamed("Ada", "Grace")
    data = event.to_dict()
    assert data["event_type"] == "CustomerRenamed"
    assert data["old_name"] == "Ada"
    assert data["new_name"] == "Grace"
    assert data["event_id"] == str(event.event_id)
    assert data["occurred_at"] == event.occurred_at.isoformat()


def test_domain_events_get_distinct_ids():
    assert DomainEvent().event_id != DomainEvent().event_id
