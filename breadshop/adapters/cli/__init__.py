"""Command-line interface adapters.

Provides CLI commands for driving the shop:
- create: Open an account
- deposit: Credit an account
- order / cancel: Place or cancel an order
- wholesale / fill: Wholesale operations (unsupported)
"""
