"""Logging events adapter.

Implements OutboundEventsPort by writing one log record per shop
outcome. State changes log at INFO; rejections and lookups that
found nothing log at WARNING.
"""

import logging

from breadshop.core.ports import OutboundEventsPort

logger = logging.getLogger(__name__)


class LoggingEventsAdapter(OutboundEventsPort):
    """Reports shop outcomes through the standard logging module."""

    def __init__(self, event_logger: logging.Logger | None = None):
        """Initialize logging events adapter.

        Args:
            event_logger: Logger to write to. Defaults to this module's logger.
        """
        self.logger = event_logger or logger

    def account_created_successfully(self, account_id: int) -> None:
        self.logger.info(
            f"Account {account_id} created",
            extra={"event": "account_created_successfully", "account_id": account_id},
        )

    def new_account_balance(self, account_id: int, new_balance_amount: int) -> None:
        self.logger.info(
            f"Account {account_id} balance is now {new_balance_amount}",
            extra={
                "event": "new_account_balance",
                "account_id": account_id,
                "balance": new_balance_amount,
            },
        )

    def account_not_found(self, account_id: int) -> None:
        self.logger.warning(
            f"Account {account_id} not found",
            extra={"event": "account_not_found", "account_id": account_id},
        )

    def order_placed(self, account_id: int, amount: int) -> None:
        self.logger.info(
            f"Order of {amount} placed for account {account_id}",
            extra={"event": "order_placed", "account_id": account_id, "quantity": amount},
        )

    def order_rejected(self, account_id: int) -> None:
        self.logger.warning(
            f"Order rejected for account {account_id}",
            extra={"event": "order_rejected", "account_id": account_id},
        )

    def order_cancelled(self, account_id: int, order_id: int) -> None:
        self.logger.info(
            f"Order {order_id} cancelled for account {account_id}",
            extra={"event": "order_cancelled", "account_id": account_id, "order_id": order_id},
        )

    def order_not_found(self, account_id: int, order_id: int) -> None:
        self.logger.warning(
            f"Order {order_id} not found for account {account_id}",
            extra={"event": "order_not_found", "account_id": account_id, "order_id": order_id},
        )

    def place_wholesale_order(self, quantity: int) -> None:
        self.logger.info(
            f"Wholesale order of {quantity} placed",
            extra={"event": "place_wholesale_order", "quantity": quantity},
        )

    def order_filled(self, account_id: int, order_id: int, quantity: int) -> None:
        self.logger.info(
            f"Order {order_id} for account {account_id} filled with {quantity}",
            extra={
                "event": "order_filled",
                "account_id": account_id,
                "order_id": order_id,
                "quantity": quantity,
            },
        )
