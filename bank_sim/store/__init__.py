"""In-memory stores for registered entities."""

from bank_sim.store.clients import InMemoryClientStore

__all__ = ["InMemoryClientStore"]
