"""CLI command implementations for the Bread Shop.

This adapter maps CLI commands (create, deposit, order, cancel,
wholesale, fill) to ShopPort operations. The shop reports outcomes
through its events port; the handler only reports whether the call
completed, failed, or is unsupported.
"""

import logging
from typing import Any

from breadshop.core.errors import DuplicateKeyError, UnsupportedOperationError
from breadshop.core.ports import ShopPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to ShopPort.

    Every method returns a result dictionary with a "status" of
    "success", "error" (duplicate id) or "unsupported".
    """

    def __init__(self, shop: ShopPort):
        """Initialize the CLI command handler.

        Args:
            shop: ShopPort implementation to execute commands.
        """
        self.shop = shop

    def create_account(self, account_id: int) -> dict[str, Any]:
        """Create an account via CLI."""
        try:
            self.shop.create_account(account_id)
            return {
                "status": "success",
                "operation": "create",
                "account_id": account_id,
            }

        except DuplicateKeyError as e:
            logger.error(f"Failed to create account: {e}")
            return {
                "status": "error",
                "operation": "create",
                "account_id": account_id,
                "message": str(e),
            }

    def deposit(self, account_id: int, amount: int) -> dict[str, Any]:
        """Deposit into an account via CLI."""
        self.shop.deposit(account_id, amount)
        return {
            "status": "success",
            "operation": "deposit",
            "account_id": account_id,
            "amount": amount,
        }

    def place_order(
        self, account_id: int, order_id: int, quantity: int
    ) -> dict[str, Any]:
        """Place an order via CLI.

        Args:
            account_id: Ordering account.
            order_id: Id for the new order, unique within the account.
            quantity: Loaves requested.

        Returns:
            Dictionary with status and the submitted order.
        """
        try:
            self.shop.place_order(account_id, order_id, quantity)
            return {
                "status": "success",
                "operation": "order",
                "account_id": account_id,
                "order_id": order_id,
                "quantity": quantity,
            }

        except DuplicateKeyError as e:
            logger.error(f"Failed to place order: {e}")
            return {
                "status": "error",
                "operation": "order",
                "account_id": account_id,
                "order_id": order_id,
                "message": str(e),
            }

    def cancel_order(self, account_id: int, order_id: int) -> dict[str, Any]:
        """Cancel an order via CLI."""
        self.shop.cancel_order(account_id, order_id)
        return {
            "status": "success",
            "operation": "cancel",
            "account_id": account_id,
            "order_id": order_id,
        }

    def place_wholesale_order(self) -> dict[str, Any]:
        """Request a wholesale order via CLI."""
        try:
            self.shop.place_wholesale_order()
            return {"status": "success", "operation": "wholesale"}

        except UnsupportedOperationError as e:
            logger.warning(str(e))
            return {
                "status": "unsupported",
                "operation": "wholesale",
                "message": str(e),
            }

    def on_wholesale_order(self, quantity: int) -> dict[str, Any]:
        """Report an arriving wholesale delivery via CLI."""
        try:
            self.shop.on_wholesale_order(quantity)
            return {"status": "success", "operation": "fill", "quantity": quantity}

        except UnsupportedOperationError as e:
            logger.warning(str(e))
            return {
                "status": "unsupported",
                "operation": "fill",
                "quantity": quantity,
                "message": str(e),
            }


def run_command(
    shop: ShopPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        shop: ShopPort implementation.
        command: Command name ('create', 'deposit', 'order', 'cancel',
            'wholesale', 'fill').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized, args is not a
            dictionary, or a required argument is missing.
    """
    if not isinstance(args, dict):
        raise ValueError(f"Arguments must be a JSON object, got {type(args).__name__}")

    handler = CLICommandHandler(shop)

    if command == "create":
        return handler.create_account(_require(args, "account_id"))

    elif command == "deposit":
        return handler.deposit(
            _require(args, "account_id"),
            _require(args, "amount"),
        )

    elif command == "order":
        return handler.place_order(
            _require(args, "account_id"),
            _require(args, "order_id"),
            _require(args, "quantity"),
        )

    elif command == "cancel":
        return handler.cancel_order(
            _require(args, "account_id"),
            _require(args, "order_id"),
        )

    elif command == "wholesale":
        return handler.place_wholesale_order()

    elif command == "fill":
        return handler.on_wholesale_order(_require(args, "quantity"))

    else:
        raise ValueError(f"Unknown command: {command}")


def _require(args: dict[str, Any], name: str) -> Any:
    if name not in args:
        raise ValueError(f"Missing required parameter: {name}")
    return args[name]
