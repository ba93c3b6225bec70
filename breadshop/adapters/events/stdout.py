"""Stdout events adapter.

Implements OutboundEventsPort by printing each shop outcome to the
terminal as a single human-readable line.
"""

import sys
from typing import TextIO

from breadshop.core.ports import OutboundEventsPort


class StdoutEventsAdapter(OutboundEventsPort):
    """Prints shop outcomes to stdout with human-readable formatting."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None):
        """Initialize stdout events adapter.

        Args:
            verbose: If True, prefix each line with the event name.
            stream: Output stream. Defaults to sys.stdout at write time.
        """
        self.verbose = verbose
        self.stream = stream

    def account_created_successfully(self, account_id: int) -> None:
        self._emit("account_created_successfully", f"Account {account_id} created")

    def new_account_balance(self, account_id: int, new_balance_amount: int) -> None:
        self._emit(
            "new_account_balance",
            f"Account {account_id} balance: {new_balance_amount}",
        )

    def account_not_found(self, account_id: int) -> None:
        self._emit("account_not_found", f"Account {account_id} not found")

    def order_placed(self, account_id: int, amount: int) -> None:
        self._emit("order_placed", f"Account {account_id} ordered {amount} loaves")

    def order_rejected(self, account_id: int) -> None:
        self._emit(
            "order_rejected",
            f"Order rejected for account {account_id}: insufficient funds",
        )

    def order_cancelled(self, account_id: int, order_id: int) -> None:
        self._emit(
            "order_cancelled",
            f"Order {order_id} cancelled for account {account_id}",
        )

    def order_not_found(self, account_id: int, order_id: int) -> None:
        self._emit(
            "order_not_found",
            f"Order {order_id} not found for account {account_id}",
        )

    def place_wholesale_order(self, quantity: int) -> None:
        self._emit("place_wholesale_order", f"Wholesale order placed: {quantity} loaves")

    def order_filled(self, account_id: int, order_id: int, quantity: int) -> None:
        self._emit(
            "order_filled",
            f"Order {order_id} for account {account_id} filled: {quantity} loaves",
        )

    def _emit(self, event: str, message: str) -> None:
        """Write one formatted line to the output stream."""
        line = self._format_line(event, message, self.verbose)
        print(line, file=self.stream or sys.stdout)

    @staticmethod
    def _format_line(event: str, message: str, verbose: bool) -> str:
        """Format a single event line."""
        if verbose:
            return f"[{event.upper()}] {message}"
        return message
