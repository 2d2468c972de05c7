"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It owns the stateful pair editor and the three call sites
that drive it (board creation, level creation, board editing).

This layer contains:
- Services: Pair collection controller, acceptance gate, edit session
- Use Cases: Generate pairs, create board, add level, edit board
- Protocols: Interfaces for persistence and pair generation
"""
