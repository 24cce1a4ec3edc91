"""Shared fixtures for featuredocs tests."""

import re

import pytest

from featuredocs.docs.changelog import DATE_HEADING_RE, RULE_LINE, find_date_section

ENTRY_RE = re.compile(r'^### (\d{4}-\d{2}-\d{2} \d{2}:\d{2}) - (.*)$')


def _entries_for_date(content: str, date: str) -> list[str]:
    lines = content.splitlines()
    start = find_date_section(lines, date)
    if start is None:
        return []

    messages = []
    for line in lines[start + 1:]:
        if DATE_HEADING_RE.match(line) or line.strip() == RULE_LINE:
            break
        m = ENTRY_RE.match(line)
        if m:
            messages.append(m.group(2))
    return messages


@pytest.fixture
def entries_for_date():
    """Messages logged under a '## <date>' heading, in document order."""
    return _entries_for_date
