"""Shared test fixtures -- clean environment, backends, sample proposals."""

import pytest

from docforge.history import InMemoryKeyValueStore, VersionStore

DOCFORGE_ENV_VARS = (
    "DOCFORGE_DB_PATH",
    "DOCFORGE_MAX_VERSIONS",
    "DOCFORGE_MAX_CONTENT_CHARS",
    "DOCFORGE_MAX_DOCUMENT_CHARS",
    "DOCFORGE_LOG_LEVEL",
)

COMPLETE_PROPOSAL = """# Problem Statement

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

MINIMAL_PROPOSAL = "We should do something about onboarding."

SLOP_PARAGRAPH = """
Furthermore, this robust, seamless and truly innovative platform will
leverage synergies to unlock a paradigm shift. Needless to say, it is a
game-changing, cutting-edge, world-class initiative.
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never see the developer's DOCFORGE_* settings."""
    for name in DOCFORGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def backend():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(backend):
    return VersionStore("proj-1", backend=backend)


@pytest.fixture
def complete_proposal():
    return COMPLETE_PROPOSAL


@pytest.fixture
def minimal_proposal():
    return MINIMAL_PROPOSAL


@pytest.fixture
def sloppy_proposal():
    return COMPLETE_PROPOSAL + SLOP_PARAGRAPH
