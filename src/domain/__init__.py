"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, protocols
(ports), and domain events. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- events/: Domain events (things that happened in the domain)
- protocols/: Domain protocols (repository and dispatcher interfaces)
- services/: Stateless operations spanning several entities
- factories/: Entity creation with generated identifiers
"""
