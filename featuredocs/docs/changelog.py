"""
Feature CHANGELOG.md handling.

Layout:

    # Feature <id> - Development Changelog
    <paragraph>
    ## Format
    <bullets>
    ---
    ## YYYY-MM-DD
    ### YYYY-MM-DD HH:MM - <message>

Date sections sit newest first directly below the rule. Entries within a
date section sit newest first directly below the heading.
"""

import logging
import re

logger = logging.getLogger(__name__)

RULE_LINE = "---"
DATE_HEADING_RE = re.compile(r'^## (\d{4}-\d{2}-\d{2})\s*$')

INIT_MESSAGE = "Initialized Feature Documentation"


def render_changelog(feature_id: str, date: str, timestamp: str) -> str:
    """Render a fresh feature changelog with its initialization entry."""
    return f"""# Feature {feature_id} - Development Changelog

This changelog tracks all development activities for this feature.

## Format
- Each entry includes: `[YYYY-MM-DD HH:MM]` timestamp
- Use `/docs.log "message"` to add entries automatically
- Entries are chronological (newest at top)

---

## {date}

### {timestamp} - {INIT_MESSAGE}
- Created CHANGELOG.md and CLAUDE.md
- Documentation system active for this feature

"""


def format_entry(timestamp: str, message: str) -> str:
    return f"### {timestamp} - {message}"


def find_rule(lines: list[str]) -> int | None:
    """Index of the rule closing the preamble, or None."""
    for i, line in enumerate(lines):
        if line.strip() == RULE_LINE:
            return i
    return None


def find_date_section(lines: list[str], date: str) -> int | None:
    """Index of the '## <date>' heading line, or None.

    Only whole heading lines count; '### <date> HH:MM' entry lines never match.
    """
    for i, line in enumerate(lines):
        m = DATE_HEADING_RE.match(line)
        if m and m.group(1) == date:
            return i
    return None


def date_sections(content: str) -> list[str]:
    """Dates of all '## YYYY-MM-DD' headings in document order."""
    return [m.group(1) for m in map(DATE_HEADING_RE.match, content.splitlines()) if m]


def add_entry(content: str, date: str, timestamp: str, message: str) -> str:
    """Return content with a new entry logged under today's date section.

    Creates the '## <date>' section directly below the preamble rule when it
    is missing; otherwise puts the entry first under the existing heading.
    """
    lines = content.splitlines()
    entry = format_entry(timestamp, message)

    heading = find_date_section(lines, date)
    if heading is not None:
        insert_at = heading + 1
        if insert_at < len(lines) and not lines[insert_at].strip():
            lines[insert_at + 1:insert_at + 1] = [entry, ""]
        else:
            lines[insert_at:insert_at] = ["", entry, ""]
    else:
        section = ["", f"## {date}", "", entry]
        rule = find_rule(lines)
        if rule is not None:
            lines[rule + 1:rule + 1] = section
        else:
            logger.warning("Changelog has no '---' rule; appending date section at end")
            while lines and not lines[-1].strip():
                lines.pop()
            lines.extend(section)
            lines.append("")

    return "\n".join(lines) + "\n"
