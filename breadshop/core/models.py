"""Domain models for the Bread Shop.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field

from .errors import DuplicateOrderError


@dataclass
class Account:
    """A customer balance plus the orders still open against it.

    Orders map order id to the quantity of bread requested. Every id
    present was added by a successful place-order and has not been
    cancelled since.

    Note: This dataclass is intentionally mutable; the shop updates
    balance and orders in place for the lifetime of the process.
    """

    balance: int = 0
    orders: dict[int, int] = field(default_factory=dict)

    def get_balance(self) -> int:
        """Return the current balance."""
        return self.balance

    def deposit(self, amount: int) -> int:
        """Add amount to the balance and return the new balance.

        A negative amount debits the account. No bounds checking is
        done here; the shop checks funds before debiting.
        """
        self.balance += amount
        return self.balance

    def add_order(self, order_id: int, quantity: int) -> None:
        """Open a new order.

        Raises:
            DuplicateOrderError: If order_id is already open.
        """
        if order_id in self.orders:
            raise DuplicateOrderError(order_id)
        self.orders[order_id] = quantity

    def cancel_order(self, order_id: int) -> int | None:
        """Remove an open order and return its quantity.

        Returns:
            The cancelled quantity, or None if no such order is open.
            None is distinct from a quantity of zero.
        """
        return self.orders.pop(order_id, None)
