"""Composition root for the Bread Shop.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Events adapter instantiation
- Shop initialization
- Interactive command loop
"""

import json
import logging
import sys
from typing import Callable

from breadshop.adapters.cli.commands import run_command
from breadshop.adapters.events import LoggingEventsAdapter, StdoutEventsAdapter
from breadshop.config import Settings, load_settings
from breadshop.core.ports import OutboundEventsPort
from breadshop.core.shop import Shop

logger = logging.getLogger(__name__)


def run_cli_interactive(
    shop: Shop,
    read_line: Callable[[str], str] = input,
) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for shop commands.

    Args:
        shop: Shop to drive.
        read_line: Prompt-and-read function, input() by default.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = read_line("breadshop> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            # Parse command and arguments
            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            # Try to parse arguments as JSON
            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = run_command(shop, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue
        except Exception as e:
            logger.error(f"CLI error: {e}", exc_info=True)


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  create
    Open an account with a zero balance.
    Required: account_id

    Example: create {"account_id": 1}

  deposit
    Credit an account.
    Required: account_id, amount

    Example: deposit {"account_id": 1, "amount": 500}

  order
    Order bread, paid for immediately.
    Required: account_id, order_id, quantity

    Example: order {"account_id": 1, "order_id": 1, "quantity": 40}

  cancel
    Cancel an open order and refund it.
    Required: account_id, order_id

    Example: cancel {"account_id": 1, "order_id": 1}

  wholesale
    Place a wholesale order for all outstanding orders (unsupported).

  fill
    Distribute a wholesale delivery across open orders (unsupported).
    Required: quantity

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_events_adapter(settings: Settings) -> OutboundEventsPort:
    """Select the events adapter named in configuration.

    Raises:
        ValueError: If the configured backend is unknown.
    """
    if settings.events_backend == "stdout":
        logger.info("Events adapter: Stdout")
        return StdoutEventsAdapter(verbose=settings.debug)
    elif settings.events_backend == "logging":
        logger.info("Events adapter: Logging")
        return LoggingEventsAdapter()
    raise ValueError(f"Unknown events backend: {settings.events_backend}")


def bootstrap(settings: Settings | None = None) -> Shop:
    """Load configuration, wire adapters, and build the shop.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the events adapter
    4. Initialize the shop

    Returns:
        A Shop wired to the configured events adapter.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger.info("Loading Bread Shop...")

    events = build_events_adapter(settings)
    shop = Shop(events, price_of_bread=settings.price_of_bread)
    logger.info(f"Shop ready, price of bread: {settings.price_of_bread}")
    return shop


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        shop = bootstrap()
        run_cli_interactive(shop)
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
