"""
Feature CLAUDE.md (architecture notes) as a structured record.

The document is parsed into an ArchitectureDoc, edited as fields, and
rendered back. Only the Status, Completed and Started header lines are
regenerated. Everything else, including free text that mentions "Status",
is re-emitted as read.
"""

import re
from dataclasses import dataclass
from enum import Enum

from featuredocs.lib.constants import FEATURE_PREFIX_RE

TITLE_RE = re.compile(r'^# Feature (\S+?):\s*(.*)$')
FIELD_RE = re.compile(r'^\*\*(Status|Started|Completed)\*\*:\s*(.*?)\s*$')
SECTION_RE = re.compile(r'^## (.+?)\s*$')
FENCE_RE = re.compile(r'^\s*(```|~~~)')


class Status(Enum):
    IN_PROGRESS = "🟡 In Progress"
    COMPLETE = "✅ Complete"

    @classmethod
    def parse(cls, value: str) -> "Status":
        """Map a free-text status value to a Status.

        Anything mentioning "complete" (but not "incomplete") is COMPLETE.
        """
        lowered = value.lower()
        if "complete" in lowered and "incomplete" not in lowered:
            return cls.COMPLETE
        return cls.IN_PROGRESS


# Sections a human is reminded to revisit after changes
UPDATE_SECTIONS = [
    "Important Files",
    "Architecture",
    "Dependencies",
    "Implementation Notes",
]

DEFAULT_SECTIONS = {
    "Overview": "Brief description of this feature.",
    "Important Files": (
        "### Created\n"
        "- `path/to/new/file.gd` - Description\n"
        "\n"
        "### Modified\n"
        "- `path/to/modified/file.gd` - What changed"
    ),
    "Architecture": (
        "### Resources\n"
        "- Resource files used by this feature\n"
        "\n"
        "### Scenes\n"
        "- Scene files created/modified\n"
        "\n"
        "### Scripts\n"
        "- Script files and their purpose"
    ),
    "Dependencies": "- Any new dependencies or packages added",
    "Implementation Notes": (
        "- Key decisions made during implementation\n"
        "- Gotchas or things to watch out for\n"
        "- Performance considerations"
    ),
    "Testing": (
        "- Test files created\n"
        "- Test coverage areas\n"
        "- Manual testing procedures"
    ),
    "Next Steps": (
        "- [ ] Remaining tasks\n"
        "- [ ] Future improvements"
    ),
}


def derive_feature_name(feature_id: str) -> str:
    """'001-plinko-physics' -> 'Plinko Physics'."""
    stripped = FEATURE_PREFIX_RE.sub("", feature_id, count=1)
    words = stripped.replace("-", " ").split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


def _field_line(key: str, value: str) -> str:
    return f"**{key}**: {value}\n"


def _field_key(line: str) -> str | None:
    m = FIELD_RE.match(line.rstrip("\r\n"))
    return m.group(1) if m else None


@dataclass
class ArchitectureDoc:
    feature_id: str
    name: str
    status: Status = Status.IN_PROGRESS
    started: str | None = None
    completed: str | None = None
    # Everything from the first section heading on, exactly as read
    body: str = ""
    # Raw header lines (with line endings) as read; None for a new document
    header: list[str] | None = None

    @property
    def sections(self) -> list[tuple[str, str]]:
        """(name, text) pairs in document order. Repeated headings stay separate."""
        return split_sections(self.body)

    def mark_complete(self, date: str) -> None:
        self.status = Status.COMPLETE
        self.completed = date

    def render(self) -> str:
        if self.header is None:
            return "".join(self._default_header()) + self.body
        return "".join(self._render_header()) + self.body

    def _default_header(self) -> list[str]:
        lines = [f"# Feature {self.feature_id}: {self.name}".rstrip() + "\n", "\n"]
        lines.append(_field_line("Status", self.status.value))
        if self.completed:
            lines.append(_field_line("Completed", self.completed))
        if self.started:
            lines.append(_field_line("Started", self.started))
        lines.append("\n")
        return lines

    def _render_header(self) -> list[str]:
        """Header lines as read, with only the Status/Completed/Started fields replaced."""
        has_completed = any(_field_key(line) == "Completed" for line in self.header)
        out = []
        status_seen = completed_done = False

        for line in self.header:
            key = _field_key(line)
            if key is None:
                out.append(line)
            elif key == "Status":
                out.append(_field_line("Status", self.status.value))
                status_seen = True
                if self.completed and not has_completed:
                    out.append(_field_line("Completed", self.completed))
                    completed_done = True
            elif key == "Completed":
                # At most one Completed line survives
                if self.completed and not completed_done:
                    out.append(_field_line("Completed", self.completed))
                    completed_done = True
            else:
                out.append(_field_line("Started", self.started) if self.started else line)

        if not status_seen:
            fields = [_field_line("Status", self.status.value)]
            if self.completed and not completed_done:
                fields.append(_field_line("Completed", self.completed))
            title_at = next((i for i, line in enumerate(out) if TITLE_RE.match(line)), None)
            if title_at is None:
                out[0:0] = fields + ["\n"]
            else:
                if not out[title_at].endswith("\n"):
                    out[title_at] += "\n"
                out[title_at + 1:title_at + 1] = ["\n"] + fields
        return out


def render_sections(sections) -> str:
    lines = []
    for name, text in sections:
        lines.append(f"## {name}")
        lines.append("")
        if text:
            lines.append(text)
            lines.append("")
    return "\n".join(lines) + "\n"


def new_architecture_doc(feature_id: str, started: str) -> ArchitectureDoc:
    return ArchitectureDoc(
        feature_id=feature_id,
        name=derive_feature_name(feature_id),
        started=started,
        body=render_sections(DEFAULT_SECTIONS.items()),
    )


def _strip_blank_edges(lines: list[str]) -> str:
    while lines and not lines[0].strip():
        lines = lines[1:]
    while lines and not lines[-1].strip():
        lines = lines[:-1]
    return "\n".join(lines)


def _section_starts(lines: list[str]):
    """Indexes of '## ' heading lines outside fenced code blocks."""
    in_fence = False
    for i, line in enumerate(lines):
        if FENCE_RE.match(line):
            in_fence = not in_fence
        elif not in_fence and SECTION_RE.match(line):
            yield i


def split_sections(body: str) -> list[tuple[str, str]]:
    lines = body.splitlines()
    starts = list(_section_starts(lines))
    sections = []
    for n, start in enumerate(starts):
        end = starts[n + 1] if n + 1 < len(starts) else len(lines)
        name = SECTION_RE.match(lines[start]).group(1)
        sections.append((name, _strip_blank_edges(lines[start + 1:end])))
    return sections


def parse_architecture(content: str, feature_id: str) -> ArchitectureDoc:
    """Parse CLAUDE.md into an ArchitectureDoc.

    The header (title and fields up to the first section heading) is kept
    line by line so that rendering only replaces the Status, Completed and
    Started lines. The body is kept byte for byte. A missing or unrecognized
    title falls back to the feature id and its derived name.
    """
    raw = content.splitlines(keepends=True)
    bare = [line.rstrip("\r\n") for line in raw]
    split_at = next(_section_starts(bare), len(raw))

    doc = ArchitectureDoc(
        feature_id=feature_id,
        name=derive_feature_name(feature_id),
        header=raw[:split_at],
        body="".join(raw[split_at:]),
    )

    title_seen = False
    for line in bare[:split_at]:
        if not title_seen and line.strip():
            title_seen = True
            m = TITLE_RE.match(line)
            if m:
                doc.feature_id = m.group(1)
                doc.name = m.group(2).strip()
                continue
        m = FIELD_RE.match(line)
        if not m:
            continue
        key, value = m.group(1), m.group(2)
        if key == "Status":
            doc.status = Status.parse(value)
        elif key == "Started":
            doc.started = value
        else:
            doc.completed = value

    return doc
