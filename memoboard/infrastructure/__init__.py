"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer. It handles all external concerns:

- Persistence (database, ORM)
- External services (AI pair generation)
- User notifications

This layer depends on domain and application layers,
but they do not depend on it.
"""
