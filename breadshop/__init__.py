"""Bread Shop: an in-memory account and order domain model.

Core domain logic lives in breadshop.core; event sinks and the
command-line surface live in breadshop.adapters.
"""
