"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Boards and their persisted pairs
- Value Objects: Pair drafts, card counts, capacity contexts
- Domain Services: Capacity, validation, level grouping and bulk insertion rules
"""
