"""Subcommand implementations for fdocs."""
