"""Helpers for web services: list-query parsing, type and time helpers, validators, request and server utilities."""

__version__ = "0.1.0"