"""Tests for the manager report and chat summary renderer."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from ceobrief.render import (
    NO_NOTES,
    NONE_LISTED,
    NOT_SET,
    NOT_SET_SHORT,
    brief_url,
    render_report,
)
from ceobrief.tools.sections import Section, parse_sections
from ceobrief.tools.telegram import MAX_TEXT, send_message

DATE = "2024-03-05"


def _lines(n: int) -> str:
    return "\n".join(f"- item {i}" for i in range(1, n + 1))


def test_long_form_has_sections_in_order(priorities_md: str) -> None:
    brief = render_report(parse_sections(priorities_md), DATE, "2024-03-04", repo="acme/ops")
    text = brief.text
    headings = [
        "# Daily CEO Brief — Netso",
        "## Detailed Manager Report",
        "### 1) Top priorities (in order)",
        "### 2) Progress since yesterday",
        "### 3) Blockers / Risks",
        "### 4) Decisions needed",
        "### 5) Docs/checklists to create or update",
        "## Notes",
    ]
    positions = [text.index(h) for h in headings]
    assert positions == sorted(positions)
    assert f"**Date/time:** {DATE} — 10:00 (Asia/Dhaka)" in text
    assert "- Reference previous brief: **2024-03-04**" in text
    assert f"- ops/briefs/{DATE}.md (this report)" in text
    assert "- Ship onboarding\n- Fix billing webhook  \n" in text
    assert text.endswith("Investor update Friday.\n")
    assert brief.date == DATE


def test_placeholders_for_empty_sections() -> None:
    brief = render_report(parse_sections(""), DATE)
    assert f"### 1) Top priorities (in order)\n{NOT_SET}  \n" in brief.text
    assert f"### 3) Blockers / Risks\n{NONE_LISTED}  \n" in brief.text
    assert f"### 4) Decisions needed\n{NONE_LISTED}  \n" in brief.text
    assert brief.text.endswith(f"## Notes\n{NO_NOTES}\n")
    assert "- Reference previous brief: **N/A**" in brief.text

    assert f"*Top priorities:* {NOT_SET_SHORT}" in brief.summary
    assert f"*Blockers:* {NONE_LISTED}" in brief.summary
    assert f"*Decisions:* {NONE_LISTED}" in brief.summary


def test_summary_layout() -> None:
    sections = {Section.TOP_PRIORITIES: "- Ship X\n- Fix Y",
                Section.BLOCKERS: "- B1",
                Section.DECISIONS: "- D1"}
    summary = render_report(sections, DATE, repo="acme/ops", company="Acme").summary
    assert summary == (
        f"*Acme — CEO Brief ({DATE})*\n"
        "*Top priorities:* \n"
        "- Ship X\n- Fix Y\n"
        "\n"
        "*Blockers:* - B1\n"
        "*Decisions:* - D1\n"
        f"*Full report:* https://github.com/acme/ops/blob/main/ops/briefs/{DATE}.md"
    )


def test_summary_truncates_to_line_limits() -> None:
    sections = {Section.TOP_PRIORITIES: _lines(9),
                Section.BLOCKERS: _lines(7),
                Section.DECISIONS: _lines(5)}
    summary = render_report(sections, DATE).summary
    assert f"*Top priorities:* \n{_lines(6)}\n\n" in summary
    assert "- item 7" not in summary.split("*Blockers:*")[0]
    assert f"*Blockers:* {_lines(4)}\n*Decisions:*" in summary
    assert f"*Decisions:* {_lines(4)}\n*Full report:*" in summary


def test_long_form_is_not_truncated() -> None:
    brief = render_report({Section.TOP_PRIORITIES: _lines(9)}, DATE)
    assert _lines(9) in brief.text


def test_rendering_is_deterministic(priorities_md: str) -> None:
    sections = parse_sections(priorities_md)
    a = render_report(sections, DATE, "2024-03-01", repo="acme/ops")
    b = render_report(sections, DATE, "2024-03-01", repo="acme/ops")
    assert a.text == b.text
    assert a.summary == b.summary


def test_brief_url() -> None:
    assert brief_url("o/r", DATE) == f"https://github.com/o/r/blob/main/ops/briefs/{DATE}.md"


@patch("ceobrief.tools.telegram.requests.post")
def test_summary_with_long_lines_keeps_report_link(mock_post: MagicMock) -> None:
    mock_post.return_value = MagicMock(**{"json.return_value": {"ok": True}})
    long_lines = "\n".join("- " + "x" * 5000 for _ in range(8))
    sections = {Section.TOP_PRIORITIES: long_lines,
                Section.BLOCKERS: long_lines,
                Section.DECISIONS: long_lines}
    summary = render_report(sections, DATE, repo="acme/ops").summary

    assert len(summary) <= MAX_TEXT
    assert summary.endswith(f"*Full report:* {brief_url('acme/ops', DATE)}")

    send_message("tok", "42", summary)
    assert mock_post.call_args.kwargs["json"]["text"] == summary
