"""
fdocs create - Initialize CHANGELOG.md and CLAUDE.md for a feature.

Existing files are never overwritten.
"""

from datetime import datetime

from featuredocs.docs import operations
from featuredocs.docs.operations import CreateResult
from featuredocs.docs.store import FileDocumentStore
from featuredocs.lib.config import ProjectConfig, feature_paths
from featuredocs.lib.locking import feature_lock
from featuredocs.lib.output import Console


def report_create(result: CreateResult, console: Console) -> None:
    for path in result.created:
        console.ok(f"Created {path}")
    for path in result.skipped:
        console.warn(f"{path.name} already exists")


def cmd_create(args, config: ProjectConfig, console: Console, store=None, now=None) -> int:
    """Create feature docs."""
    store = store or FileDocumentStore()
    paths = feature_paths(config, args.feature_id)
    operations.require_feature_dir(paths, store)

    with feature_lock(config.locks_dir, paths.feature_id, config.lock_timeout):
        result = operations.create(paths, store, now or datetime.now())

    report_create(result, console)
    return 0
