"""Test suite for the Bread Shop.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses the in-memory events fake

2. adapters/: Tests for adapter implementations
   - Validates output formatting and result mapping

3. fakes/: Port implementations for testing
   - Recording OutboundEventsPort used by core unit tests
"""
