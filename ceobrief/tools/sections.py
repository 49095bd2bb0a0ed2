import re
from enum import Enum

HEADING_RE = re.compile(r"(?m)^##[^\S\n]+(.+?)[^\S\n]*$")
NEXT_HEADING_RE = re.compile(r"(?m)^##[^\S\n]+")

class Section(str, Enum):
    WEEK_OUTCOMES = "This Week Outcomes (measurable)"
    TOP_PRIORITIES = "Today — Top Priorities (in order)"
    BLOCKERS = "Blockers / Risks"
    DECISIONS = "Decisions Needed"
    NOTES = "Notes"

def extract_section(md: str, heading: str) -> str:
    # first "## <heading>" line wins; body runs to the next "## " line (### does not end it)
    m = re.search(rf"(?m)^##[^\S\n]+{re.escape(heading)}[^\S\n]*$", md)
    if not m: return ""
    rest = md[m.end():]
    nxt = NEXT_HEADING_RE.search(rest)
    return (rest[:nxt.start()] if nxt else rest).strip()

def parse_sections(md: str) -> dict[Section, str]:
    return {s: extract_section(md, s.value) for s in Section}

def unrecognized_headings(md: str) -> list[str]:
    known = {s.value for s in Section}
    return [h for h in HEADING_RE.findall(md) if h not in known]

def head_lines(text: str, limit: int, width: int | None = None) -> str:
    lines = text.split("\n")[:limit]
    if width is not None: lines = [L[:width] for L in lines]
    return "\n".join(lines)
