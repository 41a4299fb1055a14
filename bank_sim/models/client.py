"""Client model."""

from dataclasses import dataclass, field

from bank_sim.exceptions import InvalidAccountError
from bank_sim.models.account import Account
from bank_sim.models.enums import AccountVariant
from bank_sim.models.investment import InvestmentPortfolio


@dataclass(eq=False)
class Client:
    """Bank client identified by tax id (CPF).

    Owns its accounts and exactly one investment portfolio.
    """

    tax_id: str
    name: str
    accounts: list[Account] = field(default_factory=list)
    portfolio: InvestmentPortfolio = field(default_factory=InvestmentPortfolio)

    def add_account(self, account: Account) -> None:
        """Attach an account opened for this client."""
        if account.owner_tax_id != self.tax_id:
            raise InvalidAccountError(
                f"Account {account.number} belongs to {account.owner_tax_id}, not {self.tax_id}"
            )
        self.accounts.append(account)

    def account_of(self, variant: AccountVariant) -> Account | None:
        """Return the client's account of ``variant``, if any."""
        for account in self.accounts:
            if account.variant == variant:
                return account
        return None
