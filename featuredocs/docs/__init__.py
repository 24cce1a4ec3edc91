"""Feature documentation model for featuredocs.

Two documents live in each feature directory:
- CHANGELOG.md: dated, timestamped development log (changelog module)
- CLAUDE.md: architecture notes with a status field (architecture module)

Completed features are rolled up into the project root CHANGELOG.md
(rollup module). The operations module ties these together over a
DocumentStore (store module).
"""

from featuredocs.docs.architecture import (
    ArchitectureDoc,
    Status,
    derive_feature_name,
    parse_architecture,
)
from featuredocs.docs.operations import (
    CompleteResult,
    CreateResult,
    LogResult,
    UpdateReminder,
    complete,
    create,
    ensure_feature_docs,
    log,
    update,
)
from featuredocs.docs.store import (
    DocumentStore,
    FileDocumentStore,
    MemoryDocumentStore,
)

__all__ = [
    "ArchitectureDoc",
    "Status",
    "derive_feature_name",
    "parse_architecture",
    "CompleteResult",
    "CreateResult",
    "LogResult",
    "UpdateReminder",
    "complete",
    "create",
    "ensure_feature_docs",
    "log",
    "update",
    "DocumentStore",
    "FileDocumentStore",
    "MemoryDocumentStore",
]
