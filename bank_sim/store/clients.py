"""In-memory client store keyed by tax id."""

from dataclasses import dataclass, field

from bank_sim.models import Client


@dataclass
class InMemoryClientStore:
    """Dictionary-backed client registry.

    Iteration order of :meth:`all_clients` is registration order, but
    callers should only rely on it for display.
    """

    clients: dict[str, Client] = field(default_factory=dict)

    def save(self, client: Client) -> None:
        """Register or replace a client under its tax id."""
        self.clients[client.tax_id] = client

    def find_by_tax_id(self, tax_id: str) -> Client | None:
        """Get a client by tax id."""
        return self.clients.get(tax_id)

    def all_clients(self) -> list[Client]:
        """Get every registered client."""
        return list(self.clients.values())

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        accounts = [a for c in self.clients.values() for a in c.accounts]
        investments = [i for c in self.clients.values() for i in c.portfolio]
        return {
            "clients": len(self.clients),
            "accounts": len(accounts),
            "transactions": sum(len(a.transactions) for a in accounts),
            "investments": len(investments),
            "active_investments": sum(1 for i in investments if i.is_active),
        }
