"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without printing or logging:

- FakeOutboundEventsPort: Captured events for assertion
"""

from .events import FakeOutboundEventsPort

__all__ = ["FakeOutboundEventsPort"]
