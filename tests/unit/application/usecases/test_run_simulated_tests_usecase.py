from unittest.mock import MagicMock

import pytest

from multibranch_pipeline.application.usecases.testing.run_simulated_tests_usecase import (
    RunSimulatedTestsUseCase,
)

INTEGRATION_LINES = [
    "Running integration tests...",
    "Integration Test 1: API connectivity - PASSED",
    "Integration Test 2: Database connection - PASSED",
    "Integration Test 3: External service - PASSED",
]


@pytest.fixture
def runner():
    return RunSimulatedTestsUseCase(logger=MagicMock())


def _passed_lines(lines):
    return [line for line in lines if line.startswith("Test ") and line.endswith(": PASSED")]


def test_production_transcript_runs_integration_tests(runner):
    lines = runner.execute("main")

    assert lines[:4] == [
        "Running tests for branch: main",
        "Test configuration for production:",
        "- Test count: 15",
        "- Integration tests: enabled",
    ]
    assert _passed_lines(lines) == [f"Test {i}/15: PASSED" for i in range(1, 16)]
    assert lines[-5:-1] == INTEGRATION_LINES
    assert lines[-1] == "All tests passed for branch: main"


def test_feature_transcript_skips_integration_tests(runner):
    lines = runner.execute("feature/login")

    assert "- Integration tests: disabled" in lines
    assert _passed_lines(lines) == [f"Test {i}/8: PASSED" for i in range(1, 9)]
    assert not set(INTEGRATION_LINES) & set(lines)
    assert len(lines) == 4 + 8 + 1


@pytest.mark.parametrize(
    "branch, count, environment",
    [("master", 15, "production"), ("develop", 12, "staging"), ("hotfix/crash", 10, "hotfix")],
)
def test_transcript_test_count_per_branch(runner, branch, count, environment):
    lines = runner.execute(branch)

    assert f"Test configuration for {environment}:" in lines
    assert len(_passed_lines(lines)) == count
    assert len(lines) == 4 + count + len(INTEGRATION_LINES) + 1


@pytest.mark.parametrize("branch", ["release/2.0", "unknown", "chore/deps"])
def test_release_and_unknown_branches_use_default_profile(runner, branch):
    lines = runner.execute(branch)

    assert "Test configuration for development:" in lines
    assert len(_passed_lines(lines)) == 8


def test_empty_branch_is_reported_as_unknown():
    logger = MagicMock()
    lines = RunSimulatedTestsUseCase(logger=logger).execute("")

    assert lines[0] == "Running tests for branch: unknown"
    assert lines[-1] == "All tests passed for branch: unknown"
    logger.warning.assert_called_once()
