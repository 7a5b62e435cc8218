"""
Code-Based Graders -- deterministic evaluation with exact criteria.

Use for: score ranges, report shape, history invariants. Every check is a
plain function of the graded object, so a run is fast and reproducible.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class CodeGraderResult:
    """Result from code-based grading."""

    eval_name: str
    passed: bool
    checks_passed: int = 0
    checks_total: int = 0
    failures: list[str] = field(default_factory=list)

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        lines = [f"[{status}] {self.eval_name}: {self.checks_passed}/{self.checks_total}"]
        lines.extend(f"  {f}" for f in self.failures)
        return "\n".join(lines)


class CodeGrader:
    """Deterministic grader that runs a list of named checks.

    Usage:
        grader = CodeGrader("complete_proposal")
        grader.add_check("has_sections", lambda r: len(r.sections.found) >= 4)
        grader.add_range_check("total", lambda r: r.total_score, 80, 100)
        result = grader.grade(validate_document(text))
    """

    def __init__(self, eval_name: str):
        self.eval_name = eval_name
        self._checks: list[tuple[str, Callable[[Any], bool], Callable[[Any], Any] | None]] = []

    def add_check(self, name: str, check_fn: Callable[[Any], bool]) -> "CodeGrader":
        """Add a named pass/fail check. Returns self for chaining."""
        self._checks.append((name, check_fn, None))
        return self

    def add_range_check(
        self, name: str, value_fn: Callable[[Any], float], low: float, high: float
    ) -> "CodeGrader":
        """Check that value_fn(output) lies within [low, high]."""
        self._checks.append((f"{name} in [{low}, {high}]", lambda o: low <= value_fn(o) <= high, value_fn))
        return self

    def grade(self, output: Any) -> CodeGraderResult:
        """Run all checks against the output."""
        failures = []
        passed_count = 0

        for name, check_fn, value_fn in self._checks:
            try:
                if check_fn(output):
                    passed_count += 1
                elif value_fn is not None:
                    failures.append(f"FAIL: {name} (got {value_fn(output)})")
                else:
                    failures.append(f"FAIL: {name}")
            except Exception as e:
                failures.append(f"ERROR: {name} -- {e}")

        result = CodeGraderResult(
            eval_name=self.eval_name,
            passed=len(failures) == 0,
            checks_passed=passed_count,
            checks_total=len(self._checks),
            failures=failures,
        )
        if not result.passed:
            logger.info(f"[CodeGrader] {result.summary()}")
        return result
