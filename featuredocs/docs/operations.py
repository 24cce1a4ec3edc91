"""
Feature documentation operations: create, log, update, complete.

Each operation is a plain function of its FeaturePaths, a DocumentStore and
the current time. Nothing here prints; results are returned to the caller.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from featuredocs.docs.architecture import (
    UPDATE_SECTIONS,
    new_architecture_doc,
    parse_architecture,
)
from featuredocs.docs.changelog import add_entry, date_sections, render_changelog
from featuredocs.docs.rollup import build_rollup_block
from featuredocs.docs.store import DocumentStore
from featuredocs.errors import FeatureNotFoundError, PreconditionError, UsageError
from featuredocs.lib.config import FeaturePaths
from featuredocs.lib.constants import DATE_FORMAT, ROLLUP_VERBATIM, TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


@dataclass
class CreateResult:
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


@dataclass
class LogResult:
    changelog: Path
    date: str
    timestamp: str
    message: str
    new_section: bool
    created: CreateResult | None = None


@dataclass
class UpdateReminder:
    architecture: Path
    sections: list[str]
    # Reminder sections with no heading in the document
    missing: list[str] = field(default_factory=list)


@dataclass
class CompleteResult:
    feature_id: str
    date: str
    status_updated: bool
    rolled_up: bool
    root_changelog: Path


def require_feature_dir(paths: FeaturePaths, store: DocumentStore) -> None:
    """Raise FeatureNotFoundError unless the feature directory exists."""
    if not store.is_dir(paths.feature_dir):
        raise FeatureNotFoundError(paths.feature_dir)


def require_changelog(paths: FeaturePaths, store: DocumentStore) -> None:
    """Raise unless both the feature directory and its CHANGELOG.md exist."""
    require_feature_dir(paths, store)
    if not store.exists(paths.changelog):
        raise PreconditionError(
            f"Feature {paths.changelog.name} not found: {paths.changelog}",
            path=paths.changelog,
        )


def create(paths: FeaturePaths, store: DocumentStore, now: datetime) -> CreateResult:
    """Write CHANGELOG.md and CLAUDE.md for a feature, skipping existing files."""
    require_feature_dir(paths, store)
    date = now.strftime(DATE_FORMAT)
    timestamp = now.strftime(TIMESTAMP_FORMAT)
    result = CreateResult()

    if not store.exists(paths.changelog):
        store.write(paths.changelog, render_changelog(paths.feature_id, date, timestamp))
        result.created.append(paths.changelog)
    else:
        logger.debug(f"{paths.changelog} exists, leaving untouched")
        result.skipped.append(paths.changelog)

    if not store.exists(paths.architecture):
        doc = new_architecture_doc(paths.feature_id, started=date)
        store.write(paths.architecture, doc.render())
        result.created.append(paths.architecture)
    else:
        logger.debug(f"{paths.architecture} exists, leaving untouched")
        result.skipped.append(paths.architecture)

    return result


def ensure_feature_docs(paths: FeaturePaths, store: DocumentStore, now: datetime) -> CreateResult | None:
    """Run create() when the feature changelog is missing.

    Returns the CreateResult, or None when nothing needed creating.
    """
    if store.exists(paths.changelog):
        return None
    logger.info(f"No changelog for {paths.feature_id}, initializing feature docs")
    return create(paths, store, now)


def log(paths: FeaturePaths, store: DocumentStore, message: str | None, now: datetime) -> LogResult:
    """Add a timestamped entry under today's date section."""
    require_feature_dir(paths, store)
    if not message or not message.strip():
        raise UsageError("Message required for log command")

    created = ensure_feature_docs(paths, store, now)

    date = now.strftime(DATE_FORMAT)
    timestamp = now.strftime(TIMESTAMP_FORMAT)
    content = store.read(paths.changelog)
    has_section = date in date_sections(content)

    store.write(paths.changelog, add_entry(content, date, timestamp, message))

    return LogResult(
        changelog=paths.changelog,
        date=date,
        timestamp=timestamp,
        message=message,
        new_section=not has_section,
        created=created,
    )


def update(paths: FeaturePaths, store: DocumentStore) -> UpdateReminder:
    """Return the reminder of which CLAUDE.md sections need editing.

    Read-only: the sections are edited by hand.
    """
    require_feature_dir(paths, store)
    if not store.exists(paths.architecture):
        raise PreconditionError(
            f"{paths.architecture.name} not found. Run 'create' first.",
            path=paths.architecture,
        )
    doc = parse_architecture(store.read(paths.architecture), paths.feature_id)
    present = {name for name, _ in doc.sections}
    return UpdateReminder(
        architecture=paths.architecture,
        sections=list(UPDATE_SECTIONS),
        missing=[name for name in UPDATE_SECTIONS if name not in present],
    )


def complete(
    paths: FeaturePaths,
    store: DocumentStore,
    now: datetime,
    rollup_mode: str = ROLLUP_VERBATIM,
) -> CompleteResult:
    """Mark a feature complete and roll its changelog up into the root changelog."""
    require_changelog(paths, store)

    date = now.strftime(DATE_FORMAT)
    changelog = store.read(paths.changelog)

    # Build the rollup before writing anything so a bad mode fails cleanly
    block = build_rollup_block(paths.feature_id, date, changelog, rollup_mode)

    status_updated = False
    if store.exists(paths.architecture):
        doc = parse_architecture(store.read(paths.architecture), paths.feature_id)
        doc.mark_complete(date)
        store.write(paths.architecture, doc.render())
        status_updated = True
    else:
        logger.warning(f"{paths.architecture} not found, status not updated")

    rolled_up = False
    if store.exists(paths.root_changelog):
        store.append(paths.root_changelog, block)
        rolled_up = True

    return CompleteResult(
        feature_id=paths.feature_id,
        date=date,
        status_updated=status_updated,
        rolled_up=rolled_up,
        root_changelog=paths.root_changelog,
    )
