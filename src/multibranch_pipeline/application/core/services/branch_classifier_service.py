"""Branch naming policy shared by the pipeline, the demo server and the test runner.

Rules are evaluated in order and the first matching predicate wins:

1. ``main`` / ``master``   -> Production
2. ``develop``             -> Staging
3. ``feature/*``           -> Feature (``feature/experimental`` is never auto-deployed)
4. ``hotfix/*``            -> Hotfix
5. ``release/*``           -> Release (deploys to the default development environment)
6. anything else           -> Unknown
"""

from __future__ import annotations

from typing import Callable

from multibranch_pipeline.domain.value_objects.branch_classification import (
    BranchClassification,
    BranchPolicy,
)
from multibranch_pipeline.domain.value_objects.branch_type import BranchType
from multibranch_pipeline.domain.value_objects.target_environment import TargetEnvironment

UNKNOWN_BRANCH = "unknown"
EXPERIMENTAL_FEATURE_BRANCH = "feature/experimental"

BranchPredicate = Callable[[str], bool]


def _exact(*names: str) -> BranchPredicate:
    return lambda branch: branch in names


def _prefix(prefix: str) -> BranchPredicate:
    return lambda branch: branch.startswith(prefix)


def _default_policy(branch_type: BranchType, environment: TargetEnvironment, auto_deploy: bool) -> BranchPolicy:
    return BranchPolicy(
        branch_type=branch_type,
        environment=environment,
        auto_deploy=auto_deploy,
        build_timeout_minutes=30,
        build_retention=10,
        notification_channel="#development",
    )


PRODUCTION_POLICY = BranchPolicy(
    branch_type=BranchType.PRODUCTION,
    environment=TargetEnvironment.PRODUCTION,
    auto_deploy=False,
    build_timeout_minutes=60,
    build_retention=50,
    notification_channel="#production-alerts",
)

STAGING_POLICY = BranchPolicy(
    branch_type=BranchType.STAGING,
    environment=TargetEnvironment.STAGING,
    auto_deploy=True,
    build_timeout_minutes=45,
    build_retention=20,
    notification_channel="#staging-updates",
)

FEATURE_POLICY = _default_policy(BranchType.FEATURE, TargetEnvironment.DEVELOPMENT, auto_deploy=True)
EXPERIMENTAL_FEATURE_POLICY = _default_policy(BranchType.FEATURE, TargetEnvironment.DEVELOPMENT, auto_deploy=False)
HOTFIX_POLICY = _default_policy(BranchType.HOTFIX, TargetEnvironment.HOTFIX, auto_deploy=False)
# No dedicated release environment exists; release branches use the default one.
RELEASE_POLICY = _default_policy(BranchType.RELEASE, TargetEnvironment.DEVELOPMENT, auto_deploy=False)
FALLBACK_POLICY = _default_policy(BranchType.UNKNOWN, TargetEnvironment.DEVELOPMENT, auto_deploy=False)

# Order matters: the experimental exclusion must precede the generic feature prefix.
BRANCH_RULES: tuple[tuple[BranchPredicate, BranchPolicy], ...] = (
    (_exact("main", "master"), PRODUCTION_POLICY),
    (_exact("develop"), STAGING_POLICY),
    (_exact(EXPERIMENTAL_FEATURE_BRANCH), EXPERIMENTAL_FEATURE_POLICY),
    (_prefix("feature/"), FEATURE_POLICY),
    (_prefix("hotfix/"), HOTFIX_POLICY),
    (_prefix("release/"), RELEASE_POLICY),
)


def normalize_branch_name(branch_name: str | None) -> str:
    """Absent or empty names are treated as ``unknown``."""
    return branch_name or UNKNOWN_BRANCH


class BranchClassifierService:
    """Pure lookups from a branch name to its pipeline constants."""

    @staticmethod
    def match_policy(branch_name: str | None) -> BranchPolicy | None:
        branch = normalize_branch_name(branch_name)
        for predicate, policy in BRANCH_RULES:
            if predicate(branch):
                return policy
        return None

    @staticmethod
    def is_well_formed(branch_name: str | None) -> bool:
        return BranchClassifierService.match_policy(branch_name) is not None

    @staticmethod
    def classify(branch_name: str | None) -> BranchClassification:
        branch = normalize_branch_name(branch_name)
        policy = BranchClassifierService.match_policy(branch)
        if policy is None:
            return BranchClassification(
                policy=FALLBACK_POLICY,
                well_formed=False,
                warning=(
                    f"Branch name '{branch}' does not follow the naming convention "
                    "(main, master, develop, feature/*, hotfix/*, release/*); "
                    "using default policy"
                ),
            )
        return BranchClassification(policy=policy, well_formed=True)
