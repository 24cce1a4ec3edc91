"""
Error types for featuredocs.

Every error carries the exit code the CLI returns for it.
"""


class FeatureDocsError(Exception):
    """Base error for all featuredocs failures."""

    exit_code = 1


class UsageError(FeatureDocsError):
    """Missing or malformed command arguments."""

    exit_code = 2


class FeatureNotFoundError(FeatureDocsError):
    """Feature directory does not exist."""

    exit_code = 2

    def __init__(self, feature_dir):
        self.feature_dir = feature_dir
        super().__init__(f"Feature directory not found: {feature_dir}")


class PreconditionError(FeatureDocsError):
    """A file the operation depends on is missing."""

    exit_code = 1

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)


class ConfigError(FeatureDocsError):
    """featuredocs.env could not be loaded or failed validation."""

    exit_code = 2


class LockTimeout(FeatureDocsError):
    """Lock acquisition timed out."""

    exit_code = 1
