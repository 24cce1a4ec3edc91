"""Shared helpers: config, parsing, validation, locking, output."""
