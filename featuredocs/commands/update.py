"""
fdocs update - Point at a feature's CLAUDE.md and list sections to revisit.

Read-only. The sections themselves are edited by hand.
"""

from featuredocs.docs import operations
from featuredocs.docs.store import FileDocumentStore
from featuredocs.lib.config import ProjectConfig, feature_paths
from featuredocs.lib.output import Console


def cmd_update(args, config: ProjectConfig, console: Console, store=None) -> int:
    store = store or FileDocumentStore()
    paths = feature_paths(config, args.feature_id)

    reminder = operations.update(paths, store)

    console.ok(f"{reminder.architecture.name} ready for updates at:")
    console.line(f"  {reminder.architecture}")
    console.line()
    console.line("Update sections based on recent changes:")
    for section in reminder.sections:
        console.line(f"  - {section}")
    for section in reminder.missing:
        console.warn(f"Section missing from {reminder.architecture.name}: ## {section}")
    return 0
