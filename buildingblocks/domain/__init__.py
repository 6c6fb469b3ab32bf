"""
Domain Layer

Building blocks for business domain logic, kept free of persistence and
infrastructure concerns.

Structure:
- entities/: Base entity with identity, audit metadata and pending domain events
- events/: Immutable domain event records
- value_objects/: Immutable types compared by value
"""
