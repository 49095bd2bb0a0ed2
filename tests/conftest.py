"""Shared fixtures for the brief tests. No test touches the network."""

from __future__ import annotations

import pytest

PRIORITIES_MD = """# Priorities

## This Week Outcomes (measurable)
- 3 paying pilots

## Today — Top Priorities (in order)
- Ship onboarding
- Fix billing webhook

## Blockers / Risks
- Bank API keys pending

## Decisions Needed
- Pricing tier names

## Notes
Investor update Friday.
"""


@pytest.fixture
def priorities_md() -> str:
    return PRIORITIES_MD


@pytest.fixture
def ops_dir(tmp_path):
    """Return (priorities_path, briefs_dir) under tmp_path; the priorities file is not created."""
    ops = tmp_path / "ops"
    ops.mkdir()
    return ops / "priorities.md", ops / "briefs"
