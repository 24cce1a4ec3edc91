"""
Rollup of a completed feature's changelog into the root CHANGELOG.md.

Two extraction modes:
- verbatim: the whole dated body below the preamble rule.
- legacy: the range extraction update-feature-docs.sh used. It takes lines from the
  first date heading through the next one, restarts on the following date
  heading, then drops the last extracted line. With more than one date
  section this loses headings and entries; kept only for compatibility.
"""

import re

from featuredocs.docs.changelog import RULE_LINE
from featuredocs.lib.constants import ROLLUP_LEGACY, ROLLUP_VERBATIM

# Same address as update-feature-docs.sh's sed range: '^## [0-9]'
LEGACY_DATE_RE = re.compile(r'^## [0-9]')


def _trim_blank(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def extract_verbatim(content: str) -> list[str]:
    """Every line after the preamble rule, surrounding blank lines trimmed."""
    lines = content.splitlines()
    for i, line in enumerate(lines):
        if line.strip() == RULE_LINE:
            return _trim_blank(lines[i + 1:])

    # No rule: start from the first date heading
    for i, line in enumerate(lines):
        if LEGACY_DATE_RE.match(line):
            return _trim_blank(lines[i:])
    return []


def extract_legacy(content: str) -> list[str]:
    out = []
    in_range = False
    for line in content.splitlines():
        if not in_range:
            if LEGACY_DATE_RE.match(line):
                out.append(line)
                in_range = True
        else:
            out.append(line)
            if LEGACY_DATE_RE.match(line):
                in_range = False
    return out[:-1]


def extract_rollup_body(content: str, mode: str = ROLLUP_VERBATIM) -> list[str]:
    if mode == ROLLUP_LEGACY:
        return extract_legacy(content)
    if mode != ROLLUP_VERBATIM:
        raise ValueError(f"Unknown rollup mode: {mode}")
    return extract_verbatim(content)


def build_rollup_block(feature_id: str, date: str, changelog: str, mode: str = ROLLUP_VERBATIM) -> str:
    """Text appended to the root changelog when a feature completes."""
    body = extract_rollup_body(changelog, mode)
    parts = ["", f"## Feature {feature_id} - Completed {date}", ""]
    parts.extend(body)
    parts.append("")
    return "\n".join(parts) + "\n"
