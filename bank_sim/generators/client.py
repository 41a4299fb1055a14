"""Client profile generator."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from bank_sim.generators.base import BaseGenerator
from bank_sim.models.enums import AccountVariant


@dataclass
class ClientProfile:
    """Input for registering a synthetic client."""

    name: str
    tax_id: str
    variant: AccountVariant
    opening_balance: Decimal


class ClientGenerator(BaseGenerator):
    """Generate synthetic client profiles with valid CPFs.

    Most demo clients open a checking account (~80%), the rest a savings
    account. Opening balances follow a log-normal distribution.
    """

    VARIANTS = list(AccountVariant)
    VARIANT_WEIGHTS = [0.80, 0.20]

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        super().__init__(seed, locale)
        self._seen_tax_ids: set[str] = set()

    def generate(self) -> ClientProfile:
        """Generate a single client profile.

        Returns
        -------
        ClientProfile
            Profile with a tax id not produced before by this generator.
        """
        tax_id = self.fake.cpf()
        while tax_id in self._seen_tax_ids:
            tax_id = self.fake.cpf()
        self._seen_tax_ids.add(tax_id)

        variant = self.rng.choices(self.VARIANTS, weights=self.VARIANT_WEIGHTS, k=1)[0]
        balance = min(self.rng.lognormvariate(mu=7.0, sigma=1.0), 50000)

        return ClientProfile(
            name=self.fake.name(),
            tax_id=tax_id,
            variant=variant,
            opening_balance=Decimal(str(round(balance, 2))),
        )

    def generate_batch(self, count: int) -> Iterator[ClientProfile]:
        """Generate multiple client profiles.

        Parameters
        ----------
        count : int
            Number of profiles to generate.

        Yields
        ------
        ClientProfile
            Generated profiles.
        """
        for _ in range(count):
            yield self.generate()
