"""featuredocs - per-feature CHANGELOG.md / CLAUDE.md management."""

__version__ = "0.1.0"
