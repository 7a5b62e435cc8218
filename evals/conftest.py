"""Eval fixtures -- proposal documents with expected score ranges."""

from dataclasses import dataclass

import pytest

from docforge.history import JsonFileKeyValueStore


@dataclass(frozen=True)
class FixtureDocument:
    name: str
    text: str
    min_score: int
    max_score: int


COMPLETE = """# Problem Statement

Customer onboarding takes 14 days and 30% of new accounts churn before activation.
This is a critical priority for our strategic goal of doubling self-serve revenue.

# Proposed Solution

We will build an automated onboarding workflow because manual account setup causes most of the delay.
We considered outsourcing setup but rejected it on cost.

# Business Impact

Cutting onboarding to 3 days should reduce churn by 10% and add $1.2 million in annual revenue.

# Implementation Plan

Phase 1: design and build the workflow in Q1, owned by the platform team.
Phase 2: roll out to all new accounts in Q2 with a budget of $200k.

# Success Metrics

Track activation rate weekly against a 14 day baseline.

# Risks

The main risk is CRM integration delay; mitigation is a manual fallback.
"""

UNSTRUCTURED = """Onboarding is our biggest problem: it takes 14 days and is a critical priority for the strategic growth goal.
We propose to automate account setup because manual steps cause the delay.
This should reduce churn by 10% and add $1.2 million in revenue.
Phase 1 runs in Q1 with the platform team; Phase 2 follows in Q2 within the approved budget.
"""

SLOP = """
Furthermore, this robust, seamless and truly innovative platform will
leverage synergies to unlock a paradigm shift. Needless to say, it is a
game-changing, cutting-edge, world-class initiative.
"""

MINIMAL = "We should do something about onboarding."

FIXTURE_DOCUMENTS = (
    FixtureDocument("complete", COMPLETE, 90, 100),
    FixtureDocument("unstructured", UNSTRUCTURED, 60, 85),
    FixtureDocument("sloppy", COMPLETE + SLOP, 75, 95),
    FixtureDocument("minimal", MINIMAL, 0, 20),
)


@pytest.fixture
def documents():
    """Fixture documents keyed by name."""
    return {doc.name: doc for doc in FIXTURE_DOCUMENTS}


@pytest.fixture
def file_backend(tmp_path):
    """JSON-file backend in a throwaway directory."""
    return JsonFileKeyValueStore(tmp_path / "history")
