from dataclasses import dataclass
from ceobrief.tools.sections import Section, head_lines

NOT_SET = "_(Not set — update ops/priorities.md)_"
NOT_SET_SHORT = "_(Not set)_"
NONE_LISTED = "_None listed_"
NO_NOTES = "_No notes_"
RUN_LOG_HINT = "_Update ops/run-log.md with what shipped yesterday so this section becomes factual._"

BRIEF_URL = "https://github.com/{repo}/blob/main/ops/briefs/{date}.md"
SUMMARY_PRIORITY_LINES = 6
SUMMARY_BLOCKER_LINES = 4
SUMMARY_DECISION_LINES = 4
# 14 lines of at most 250 chars plus header and link stay under the 4096-char sendMessage limit
SUMMARY_LINE_WIDTH = 250

@dataclass(frozen=True)
class Brief:
    date: str
    text: str
    summary: str

def brief_url(repo: str, date: str) -> str:
    return BRIEF_URL.format(repo=repo, date=date)

def render_manager_report(sections: dict, date: str, prior_ref: str | None = None,
                          company: str = "Netso", brief_time: str = "10:00",
                          timezone_label: str = "Asia/Dhaka") -> str:
    top = sections.get(Section.TOP_PRIORITIES, "")
    blockers = sections.get(Section.BLOCKERS, "")
    decisions = sections.get(Section.DECISIONS, "")
    notes = sections.get(Section.NOTES, "")

    md = [f"# Daily CEO Brief — {company}",
          f"**Date/time:** {date} — {brief_time} ({timezone_label})",
          "",
          "## Detailed Manager Report",
          "",
          "### 1) Top priorities (in order)",
          f"{top or NOT_SET}  ",
          "",
          "### 2) Progress since yesterday",
          f"- Reference previous brief: **{prior_ref or 'N/A'}**",
          f"- {RUN_LOG_HINT}",
          "",
          "### 3) Blockers / Risks",
          f"{blockers or NONE_LISTED}  ",
          "",
          "### 4) Decisions needed",
          f"{decisions or NONE_LISTED}  ",
          "",
          "### 5) Docs/checklists to create or update",
          "- ops/priorities.md (update daily)",
          "- ops/run-log.md (log real progress)",
          f"- ops/briefs/{date}.md (this report)",
          "",
          "## Notes",
          notes or NO_NOTES]
    return "\n".join(md) + "\n"

def render_summary(sections: dict, date: str, repo: str = "OWNER/REPO",
                   company: str = "Netso") -> str:
    # Telegram Markdown; kept short for the chat
    top = sections.get(Section.TOP_PRIORITIES, "")
    blockers = sections.get(Section.BLOCKERS, "")
    decisions = sections.get(Section.DECISIONS, "")
    lines = [f"*{company} — CEO Brief ({date})*",
             f"*Top priorities:* {'' if top else NOT_SET_SHORT}",
             head_lines(top, SUMMARY_PRIORITY_LINES, SUMMARY_LINE_WIDTH) if top else "",
             "",
             f"*Blockers:* {head_lines(blockers, SUMMARY_BLOCKER_LINES, SUMMARY_LINE_WIDTH) if blockers else NONE_LISTED}",
             f"*Decisions:* {head_lines(decisions, SUMMARY_DECISION_LINES, SUMMARY_LINE_WIDTH) if decisions else NONE_LISTED}",
             f"*Full report:* {brief_url(repo, date)}"]
    return "\n".join(lines)

def render_report(sections: dict, date: str, prior_ref: str | None = None,
                  repo: str = "OWNER/REPO", company: str = "Netso",
                  brief_time: str = "10:00", timezone_label: str = "Asia/Dhaka") -> Brief:
    """Long-form manager report plus the condensed chat summary for one date."""
    text = render_manager_report(sections, date, prior_ref, company, brief_time, timezone_label)
    return Brief(date=date, text=text, summary=render_summary(sections, date, repo, company))
