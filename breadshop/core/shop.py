"""Shop service: implements ShopPort for account and order operations.

This is the core orchestrator. It owns one AccountRepository and
reports every outcome through the OutboundEventsPort supplied by the
caller. Missing accounts, missing orders and insufficient funds are
reported as events; duplicate ids are raised.
"""

import logging

from .errors import DuplicateKeyError, UnsupportedOperationError
from .models import Account
from .ports import OutboundEventsPort, ShopPort
from .repository import AccountRepository

logger = logging.getLogger(__name__)

PRICE_OF_BREAD = 12


class Shop(ShopPort):
    """Core implementation of ShopPort.

    Not thread-safe. Callers sharing a Shop must serialize access.
    """

    def __init__(
        self,
        events: OutboundEventsPort,
        price_of_bread: int = PRICE_OF_BREAD,
    ):
        """Initialize the shop.

        Args:
            events: OutboundEventsPort implementation receiving all results.
            price_of_bread: Price per unit of bread.
        """
        self.events = events
        self.price_of_bread = price_of_bread
        self.accounts = AccountRepository()

    def create_account(self, account_id: int) -> None:
        """Create an account with zero balance.

        Raises:
            DuplicateAccountError: If account_id is already in use.
        """
        try:
            self.accounts.add_account(account_id, Account())
        except DuplicateKeyError as e:
            logger.error(f"Failed to create account: {e}")
            raise

        logger.debug(f"Created account {account_id}")
        self.events.account_created_successfully(account_id)

    def deposit(self, account_id: int, amount: int) -> None:
        """Credit an account and report its new balance."""
        account = self.accounts.get_account(account_id)
        if account is None:
            self.events.account_not_found(account_id)
            return

        new_balance = account.deposit(amount)
        logger.debug(f"Deposited {amount} into account {account_id}")
        self.events.new_account_balance(account_id, new_balance)

    def place_order(self, account_id: int, order_id: int, quantity: int) -> None:
        """Place an order if the account can afford it.

        On success emits order_placed then new_account_balance. If the
        balance is below the cost, emits order_rejected and changes
        nothing.

        Raises:
            DuplicateOrderError: If order_id is already open. Raised
                before the balance is debited.
        """
        account = self.accounts.get_account(account_id)
        if account is None:
            self.events.account_not_found(account_id)
            return

        cost = quantity * self.price_of_bread
        if account.get_balance() < cost:
            logger.debug(
                f"Rejected order {order_id} for account {account_id}: "
                f"cost {cost} exceeds balance {account.get_balance()}"
            )
            self.events.order_rejected(account_id)
            return

        try:
            account.add_order(order_id, quantity)
        except DuplicateKeyError as e:
            logger.error(f"Failed to place order for account {account_id}: {e}")
            raise

        new_balance = account.deposit(-cost)
        logger.debug(f"Placed order {order_id} for account {account_id}: {quantity} units")
        self.events.order_placed(account_id, quantity)
        self.events.new_account_balance(account_id, new_balance)

    def cancel_order(self, account_id: int, order_id: int) -> None:
        """Cancel an open order and refund its full cost.

        On success emits order_cancelled then new_account_balance.
        """
        account = self.accounts.get_account(account_id)
        if account is None:
            self.events.account_not_found(account_id)
            return

        cancelled_quantity = account.cancel_order(order_id)
        if cancelled_quantity is None:
            self.events.order_not_found(account_id, order_id)
            return

        new_balance = account.deposit(cancelled_quantity * self.price_of_bread)
        logger.debug(f"Cancelled order {order_id} for account {account_id}")
        self.events.order_cancelled(account_id, order_id)
        self.events.new_account_balance(account_id, new_balance)

    def place_wholesale_order(self) -> None:
        raise UnsupportedOperationError("place_wholesale_order")

    def on_wholesale_order(self, quantity: int) -> None:
        raise UnsupportedOperationError("on_wholesale_order")
