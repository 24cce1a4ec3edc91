"""
fdocs log - Add a timestamped entry to a feature's CHANGELOG.md.

Initializes the feature docs first when the changelog does not exist yet.
"""

from datetime import datetime

from featuredocs.commands.create import report_create
from featuredocs.docs import operations
from featuredocs.docs.store import FileDocumentStore
from featuredocs.errors import UsageError
from featuredocs.lib.config import ProjectConfig, feature_paths
from featuredocs.lib.locking import feature_lock
from featuredocs.lib.output import Console


def cmd_log(args, config: ProjectConfig, console: Console, store=None, now=None) -> int:
    """Log a changelog entry."""
    store = store or FileDocumentStore()
    paths = feature_paths(config, args.feature_id)
    operations.require_feature_dir(paths, store)

    if not args.message or not args.message.strip():
        raise UsageError("Message required for log command")

    with feature_lock(config.locks_dir, paths.feature_id, config.lock_timeout):
        result = operations.log(paths, store, args.message, now or datetime.now())

    if result.created:
        report_create(result.created, console)
    if result.new_section:
        console.ok(f"Started new section ## {result.date}")
    console.ok(f"Logged to {result.changelog}")
    console.highlight(result.timestamp, result.message)
    return 0
