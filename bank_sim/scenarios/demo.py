"""Demo scenario that populates a bank with synthetic clients."""

import logging
import random
from decimal import Decimal

from bank_sim.generators import ClientGenerator
from bank_sim.models import Client
from bank_sim.services import BankingService

logger = logging.getLogger(__name__)


class DemoBankScenario:
    """Register synthetic clients so the console has something to show.

    Each client gets one account funded with an opening deposit. A share
    of them also move part of the balance into an investment.
    """

    INVESTMENT_NAMES = ["CDB", "LCI", "LCA", "Tesouro Selic", "Tesouro IPCA+", "Fundo DI"]

    def __init__(
        self,
        num_clients: int = 5,
        investment_penetration: float = 0.30,
        seed: int | None = None,
        locale: str = "pt_BR",
    ) -> None:
        """Initialize demo scenario.

        Parameters
        ----------
        num_clients : int
            Number of clients to register.
        investment_penetration : float
            Share of clients that open an investment.
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for names and tax ids.
        """
        self.num_clients = num_clients
        self.investment_penetration = investment_penetration
        self._rng = random.Random(seed)
        self._client_gen = ClientGenerator(seed=seed, locale=locale)

    def generate(self, service: BankingService) -> list[Client]:
        """Register the demo clients through ``service``.

        Returns
        -------
        list[Client]
            Clients that were registered. Profiles whose tax id is already
            taken in the service are skipped.
        """
        logger.info("Starting demo scenario: %d clients", self.num_clients)
        clients: list[Client] = []

        for profile in self._client_gen.generate_batch(self.num_clients):
            created = service.create_client(profile.name, profile.tax_id)
            if not created:
                logger.debug("Skipping demo client %s: %s", profile.tax_id, created.message)
                continue
            client = created.value

            opened = service.add_account_for_client(client.tax_id, profile.variant)
            account = opened.value
            service.deposit(account, profile.opening_balance)

            if self._rng.random() < self.investment_penetration:
                share = Decimal(str(round(self._rng.uniform(0.1, 0.5), 2)))
                service.invest(
                    account,
                    self._rng.choice(self.INVESTMENT_NAMES),
                    (account.balance * share).quantize(Decimal("0.01")),
                )
            clients.append(client)

        logger.info("Demo scenario complete: %s", service.store.summary())
        return clients
