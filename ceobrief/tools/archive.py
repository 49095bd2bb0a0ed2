import os, re
from datetime import datetime, timedelta, timezone

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def today_iso(offset_hours: float = 6, now: datetime | None = None) -> str:
    # fixed offset, not a tz database lookup: shift the UTC instant and take the date
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None: now = now.astimezone(timezone.utc)
    return (now + timedelta(hours=offset_hours)).date().isoformat()

def brief_path(briefs_dir: str, date: str) -> str:
    return os.path.join(briefs_dir, f"{date}.md")

def list_briefs(briefs_dir: str) -> list[str]:
    """Dated brief stems in briefs_dir, newest first. Missing/unreadable dir -> []."""
    try: names = os.listdir(briefs_dir)
    except OSError: return []
    stems = [n[:-3] for n in names if n.endswith(".md")]
    return sorted((s for s in stems if DATE_RE.match(s)), reverse=True)

def find_latest_brief(briefs_dir: str) -> str | None:
    dated = list_briefs(briefs_dir)
    return brief_path(briefs_dir, dated[0]) if dated else None

def write_brief(briefs_dir: str, date: str, text: str) -> str:
    os.makedirs(briefs_dir, exist_ok=True)
    path = brief_path(briefs_dir, date)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path
