"""In-memory account repository.

One repository is owned by each Shop; there is no process-wide state.
"""

from .errors import DuplicateAccountError
from .models import Account


class AccountRepository:
    """Maps account ids to the accounts they own."""

    def __init__(self):
        self._accounts: dict[int, Account] = {}

    def add_account(self, account_id: int, account: Account) -> None:
        """Store a new account.

        Raises:
            DuplicateAccountError: If account_id is already present.
        """
        if account_id in self._accounts:
            raise DuplicateAccountError(account_id)
        self._accounts[account_id] = account

    def get_account(self, account_id: int) -> Account | None:
        """Look up an account by id.

        Returns:
            The account if found, None otherwise.
        """
        return self._accounts.get(account_id)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
