"""
History Evals -- scripted editing sessions against a file-backed store.

CODE-BASED graders: after every step the stored history must stay dense
(numbers 1..n), keep its cursor in range, and respect max_versions.
"""

import pytest

from docforge.history import VersionStore
from evals.graders.code_grader import CodeGrader

# A writer drafting, undoing, branching and redoing. "save:<text>", "back", "forward".
SESSION = (
    "save:outline", "save:outline + problem", "save:outline + problem + solution",
    "back", "back", "forward",
    "save:outline + problem (rewritten)",
    "forward", "save:outline + problem (rewritten)",
    "back", "back", "back",
    "save:fresh start",
    "save:fresh start + impact", "save:fresh start + impact + plan",
    "back", "forward", "forward",
)


def history_grader(max_versions: int) -> CodeGrader:
    grader = CodeGrader("history_invariants")
    grader.add_check(
        "dense_numbering",
        lambda h: [e.sequence_number for e in h.entries] == list(range(1, len(h.entries) + 1)),
    )
    grader.add_check(
        "cursor_in_range",
        lambda h: (h.cursor == -1) if h.is_empty else 0 <= h.cursor < len(h.entries),
    )
    grader.add_check("bounded", lambda h: len(h.entries) <= max_versions)
    return grader


def run_session(store: VersionStore, steps, grader: CodeGrader):
    for step in steps:
        if step.startswith("save:"):
            store.save_version(step[len("save:"):])
        elif step == "back":
            store.go_back()
        else:
            store.go_forward()
        result = grader.grade(store.snapshot())
        assert result.passed, f"after {step!r}: {result.summary()}"


class TestEditingSession:
    """Eval: Do history invariants hold through a realistic session?"""

    @pytest.mark.parametrize("max_versions", [2, 3, 10])
    def test_invariants_hold(self, file_backend, max_versions):
        store = VersionStore("proposal-7", backend=file_backend, max_versions=max_versions)
        run_session(store, SESSION, history_grader(max_versions))

    def test_final_state(self, file_backend):
        store = VersionStore("proposal-7", backend=file_backend)
        run_session(store, SESSION, history_grader(10))
        contents = [e.content for e in store.snapshot().entries]
        assert contents == [
            "fresh start",
            "fresh start + impact",
            "fresh start + impact + plan",
        ]
        current = store.get_current_version()
        assert current.version_number == 3
        assert not current.can_go_forward

    def test_session_survives_reopen(self, file_backend):
        store = VersionStore("proposal-7", backend=file_backend)
        run_session(store, SESSION[:6], history_grader(10))
        reopened = VersionStore("proposal-7", backend=file_backend)
        assert reopened.get_current_version() == store.get_current_version()
