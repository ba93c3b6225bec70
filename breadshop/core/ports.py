"""Port interfaces for the Bread Shop.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - OutboundEventsPort: Report every state change or rejection

2. **Driving Ports** (adapters/external systems call into core)
   - ShopPort: Account and order operations
"""

from abc import ABC, abstractmethod


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class OutboundEventsPort(ABC):
    """Port for reporting the outcome of shop operations.

    Shop operations return nothing; every result, success or rejection,
    is delivered to the caller through one of these methods. Adapters
    may print, log, record for tests, or forward to a message bus.

    Implementations are called synchronously from within the shop
    operation and should not call back into the shop.
    """

    @abstractmethod
    def account_created_successfully(self, account_id: int) -> None:
        """A new account with zero balance was created."""

    @abstractmethod
    def new_account_balance(self, account_id: int, new_balance_amount: int) -> None:
        """The account balance changed.

        Args:
            account_id: The account whose balance changed.
            new_balance_amount: Balance after the change.
        """

    @abstractmethod
    def account_not_found(self, account_id: int) -> None:
        """An operation referenced an account that does not exist."""

    @abstractmethod
    def order_placed(self, account_id: int, amount: int) -> None:
        """An order was accepted and paid for.

        Args:
            account_id: The ordering account.
            amount: Quantity of bread ordered.
        """

    @abstractmethod
    def order_rejected(self, account_id: int) -> None:
        """An order was refused because the balance could not cover it."""

    @abstractmethod
    def order_cancelled(self, account_id: int, order_id: int) -> None:
        """An open order was cancelled and refunded."""

    @abstractmethod
    def order_not_found(self, account_id: int, order_id: int) -> None:
        """A cancellation referenced an order that is not open."""

    @abstractmethod
    def place_wholesale_order(self, quantity: int) -> None:
        """Request a wholesale delivery covering outstanding orders.

        Not emitted by the current shop; see Shop.place_wholesale_order.
        """

    @abstractmethod
    def order_filled(self, account_id: int, order_id: int, quantity: int) -> None:
        """Part or all of an open order was filled from a wholesale delivery.

        Not emitted by the current shop; see Shop.on_wholesale_order.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class ShopPort(ABC):
    """Port for customer-initiated shop operations.

    Driving port: the CLI (or any other front end) invokes these
    methods. Implementations live in the core (shop.py).

    None of the operations return a value. Results are reported
    through the OutboundEventsPort the shop was built with.
    """

    @abstractmethod
    def create_account(self, account_id: int) -> None:
        """Open a new account with a zero balance.

        Raises:
            DuplicateAccountError: If the id is already in use.
        """

    @abstractmethod
    def deposit(self, account_id: int, amount: int) -> None:
        """Credit an account."""

    @abstractmethod
    def place_order(self, account_id: int, order_id: int, quantity: int) -> None:
        """Order a quantity of bread, paying for it immediately.

        Raises:
            DuplicateOrderError: If order_id is already open on the account.
        """

    @abstractmethod
    def cancel_order(self, account_id: int, order_id: int) -> None:
        """Cancel an open order and refund its cost."""

    @abstractmethod
    def place_wholesale_order(self) -> None:
        """Request a wholesale delivery for all outstanding orders.

        Raises:
            UnsupportedOperationError: Always.
        """

    @abstractmethod
    def on_wholesale_order(self, quantity: int) -> None:
        """Distribute an arriving wholesale delivery across open orders.

        Raises:
            UnsupportedOperationError: Always.
        """
