"""Shared constants for featuredocs."""

import re

CHANGELOG_FILENAME = "CHANGELOG.md"
ARCHITECTURE_FILENAME = "CLAUDE.md"
CONFIG_FILENAME = "featuredocs.env"

DEFAULT_SPECS_DIR = "specs"
DEFAULT_LOCK_TIMEOUT = 10
LOCKS_DIR = ".featuredocs/locks"

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# Rollup extraction modes
ROLLUP_VERBATIM = "verbatim"
ROLLUP_LEGACY = "legacy"
VALID_ROLLUP_MODES = (ROLLUP_VERBATIM, ROLLUP_LEGACY)

# Leading "001-" style prefix stripped when deriving a feature name
FEATURE_PREFIX_RE = re.compile(r'^[0-9]*-')
