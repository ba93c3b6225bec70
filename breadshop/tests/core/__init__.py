"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
The events port is replaced with the in-memory fake from tests/fakes/.
"""
