"""
fdocs complete - Mark a feature complete and roll it up into the root CHANGELOG.md.

The feature's own CHANGELOG.md is left in place.
"""

from datetime import datetime

from featuredocs.docs import operations
from featuredocs.docs.store import FileDocumentStore
from featuredocs.lib.config import ProjectConfig, feature_paths
from featuredocs.lib.locking import feature_lock
from featuredocs.lib.output import Console


def cmd_complete(args, config: ProjectConfig, console: Console, store=None, now=None) -> int:
    """Mark feature complete."""
    store = store or FileDocumentStore()
    paths = feature_paths(config, args.feature_id)
    # Preconditions first: a failed complete writes no lock file
    operations.require_changelog(paths, store)

    with feature_lock(config.locks_dir, paths.feature_id, config.lock_timeout):
        result = operations.complete(paths, store, now or datetime.now(), config.rollup_mode)

    if result.status_updated:
        console.ok(f"Updated {paths.architecture.name} status to Complete")
    else:
        console.warn(f"No {paths.architecture.name} found, status not updated")

    if result.rolled_up:
        console.ok(f"Rolled up changes to root {result.root_changelog.name}")
    else:
        console.warn(f"No root {result.root_changelog.name} found")

    console.ok(f"Feature {result.feature_id} marked complete!")
    return 0
