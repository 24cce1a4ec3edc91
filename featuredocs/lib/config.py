"""
Configuration loaders for featuredocs.

Resolves the project root and loads the optional featuredocs.env from it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from . import envparse
from . import validate
from .constants import (
    ARCHITECTURE_FILENAME,
    CHANGELOG_FILENAME,
    CONFIG_FILENAME,
    DEFAULT_LOCK_TIMEOUT,
    DEFAULT_SPECS_DIR,
    LOCKS_DIR,
    ROLLUP_VERBATIM,
    VALID_ROLLUP_MODES,
)
from featuredocs.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class ProjectConfig:
    """Project-level configuration from featuredocs.env"""
    root: Path
    specs_dir: str  # Relative to root, e.g., "specs"
    root_changelog: str  # Relative to root, e.g., "CHANGELOG.md"
    rollup_mode: str  # "verbatim" or "legacy"
    lock_timeout: int

    @property
    def locks_dir(self) -> Path:
        return self.root / LOCKS_DIR


@dataclass
class FeaturePaths:
    """Resolved document paths for one feature."""
    feature_id: str
    feature_dir: Path
    changelog: Path
    architecture: Path
    root_changelog: Path


def find_project_root(start: Path) -> Path:
    """Walk up from start to the first directory holding featuredocs.env or specs/.

    Falls back to start itself when no ancestor qualifies.
    """
    start = start.resolve()
    for candidate in [start, *start.parents]:
        if (candidate / CONFIG_FILENAME).is_file() or (candidate / DEFAULT_SPECS_DIR).is_dir():
            return candidate
    return start


def load_project_config(root: Path) -> ProjectConfig:
    """Load featuredocs.env from root (if present) and return ProjectConfig."""
    env = {}
    config_path = root / CONFIG_FILENAME
    if config_path.exists():
        try:
            env = envparse.parse_env(config_path.read_text(encoding="utf-8"), source=str(config_path))
            validate.validate(env, "config")
        except (OSError, ValueError, validate.ValidationError) as e:
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e

    rollup_mode = env.get("ROLLUP_MODE", ROLLUP_VERBATIM)
    if rollup_mode not in VALID_ROLLUP_MODES:
        logger.warning(
            f"Unknown ROLLUP_MODE '{rollup_mode}', using '{ROLLUP_VERBATIM}'. "
            f"Valid modes: {', '.join(VALID_ROLLUP_MODES)}"
        )
        rollup_mode = ROLLUP_VERBATIM

    return ProjectConfig(
        root=root,
        specs_dir=env.get("SPECS_DIR", DEFAULT_SPECS_DIR),
        root_changelog=env.get("ROOT_CHANGELOG", CHANGELOG_FILENAME),
        rollup_mode=rollup_mode,
        lock_timeout=int(env.get("LOCK_TIMEOUT", str(DEFAULT_LOCK_TIMEOUT))),
    )


def feature_paths(config: ProjectConfig, feature_id: str) -> FeaturePaths:
    feature_dir = config.root / config.specs_dir / feature_id
    return FeaturePaths(
        feature_id=feature_id,
        feature_dir=feature_dir,
        changelog=feature_dir / CHANGELOG_FILENAME,
        architecture=feature_dir / ARCHITECTURE_FILENAME,
        root_changelog=config.root / config.root_changelog,
    )
