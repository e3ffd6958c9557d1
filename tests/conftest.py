"""Pytest configuration, shared fixtures & custom summary hook.

Also ensures the project root is on sys.path for imports.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'import flowshop_sa.*' works
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from flowshop_sa.generator import generate_jobs  # noqa: E402


@pytest.fixture
def small_jobs() -> list[list[int]]:
    """3 jobs x 2 machines worked example."""
    return [[3, 2], [2, 3], [4, 1]]


@pytest.fixture
def random_jobs() -> list[list[int]]:
    """Seeded 8 jobs x 4 machines instance."""
    return generate_jobs(8, 4, rng=random.Random(7))


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a compact custom summary at the end of test session."""
    stats = terminalreporter.stats
    collected = terminalreporter._numcollected  # type: ignore[attr-defined]
    passed = len(stats.get("passed", []))
    failed = len(stats.get("failed", []))
    errors = len(stats.get("error", []))
    skipped = len(stats.get("skipped", []))

    terminalreporter.section("Custom summary", sep="=")
    terminalreporter.write_line(
        "Collected: "
        f"{collected} | Passed: {passed} | Failed: {failed} | "
        f"Errors: {errors} | Skipped: {skipped}"
    )
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in stats["failed"]:
            terminalreporter.write_line(f"  - {rep.nodeid}")
