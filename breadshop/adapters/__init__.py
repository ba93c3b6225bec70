"""External adapters for the Bread Shop.

This package provides implementations of the core port interfaces
and the surfaces that drive the shop.

Adapter Organization:

- events/: Sinks for shop outcomes (stdout, logging)
- cli/: Command-line interface mapping commands to shop operations
"""
