"""Tests for adapter implementations.

These tests exercise adapters to validate correct translation between
shop outcomes and external formats.
"""
