from __future__ import annotations

from dataclasses import dataclass

from multibranch_pipeline.domain.value_objects.branch_type import BranchType
from multibranch_pipeline.domain.value_objects.target_environment import TargetEnvironment


@dataclass(frozen=True, slots=True)
class BranchPolicy:
    """Constants a pipeline run derives from its branch naming convention."""

    branch_type: BranchType
    environment: TargetEnvironment
    auto_deploy: bool
    build_timeout_minutes: int
    build_retention: int
    notification_channel: str


@dataclass(frozen=True, slots=True)
class BranchClassification:
    """
    Result of classifying a branch name.
    - policy: the derived constants of the first matching rule.
    - well_formed: False when only the fallback rule matched.
    - warning: non-fatal message for callers to log, set for malformed names.
    """

    policy: BranchPolicy
    well_formed: bool
    warning: str | None = None

    @property
    def branch_type(self) -> BranchType:
        return self.policy.branch_type

    @property
    def environment(self) -> TargetEnvironment:
        return self.policy.environment

    @property
    def auto_deploy(self) -> bool:
        return self.policy.auto_deploy

    @property
    def build_timeout_minutes(self) -> int:
        return self.policy.build_timeout_minutes

    @property
    def build_retention(self) -> int:
        return self.policy.build_retention

    @property
    def notification_channel(self) -> str:
        return self.policy.notification_channel

    def to_dict(self) -> dict[str, object]:
        return {
            "branch_type": self.branch_type.value,
            "environment": self.environment.value,
            "auto_deploy": self.auto_deploy,
            "build_timeout_minutes": self.build_timeout_minutes,
            "build_retention": self.build_retention,
            "notification_channel": self.notification_channel,
            "well_formed": self.well_formed,
            "warning": self.warning,
        }
