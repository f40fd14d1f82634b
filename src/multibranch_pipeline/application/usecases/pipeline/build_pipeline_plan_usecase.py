from __future__ import annotations

import logging

from multibranch_pipeline.application.core.services.branch_classifier_service import (
    BranchClassifierService,
    normalize_branch_name,
)
from multibranch_pipeline.application.core.services.test_profile_service import TestProfileService
from multibranch_pipeline.application.core.shared.deployment_tag_service import sanitize_tag
from multibranch_pipeline.application.dtos.pipeline_plan_dto import PipelinePlanDTO, StagePlanDTO
from multibranch_pipeline.domain.value_objects.branch_classification import BranchClassification
from multibranch_pipeline.domain.value_objects.branch_type import BranchType
from multibranch_pipeline.domain.value_objects.test_profile import TestProfile


class BuildPipelinePlanUseCase:
    """
    Resolves which pipeline stages run for a branch.
    The CI engine executes the stages; this only decides the gating.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def execute(self, branch_name: str | None, build_number: int | str) -> PipelinePlanDTO:
        branch = normalize_branch_name(branch_name)
        build = str(build_number)
        classification = BranchClassifierService.classify(branch)
        if classification.warning:
            self.logger.warning(classification.warning)

        profile = TestProfileService.profile_for(classification.branch_type)
        docker_tag = sanitize_tag(branch, build)
        self.logger.info(
            f"Planning build {build} of '{branch}' "
            f"({classification.branch_type.value} -> {classification.environment.value})"
        )

        return PipelinePlanDTO(
            branch=branch,
            build=build,
            branch_type=classification.branch_type.value,
            environment=classification.environment.value,
            timeout_minutes=classification.build_timeout_minutes,
            build_retention=classification.build_retention,
            notification_channel=classification.notification_channel,
            auto_deploy=classification.auto_deploy,
            docker_tag=docker_tag,
            warning=classification.warning,
            stages=self._build_stages(classification, profile, docker_tag),
        )

    def _build_stages(
        self, classification: BranchClassification, profile: TestProfile, docker_tag: str
    ) -> list[StagePlanDTO]:
        return [
            StagePlanDTO(name="Checkout", enabled=True),
            StagePlanDTO(name="Install Dependencies", enabled=True),
            StagePlanDTO(name="Unit Tests", enabled=True, reason=f"{profile.test_count} tests"),
            StagePlanDTO(
                name="Integration Tests",
                enabled=not profile.skip_integration_tests,
                reason=(
                    f"skipped for {classification.branch_type.value} branches"
                    if profile.skip_integration_tests
                    else "3 integration tests"
                ),
            ),
            StagePlanDTO(name="Build Docker Image", enabled=True, reason=f"tag {docker_tag}"),
            self._deploy_stage(classification),
            StagePlanDTO(name="Notify", enabled=True, reason=f"channel {classification.notification_channel}"),
        ]

    @staticmethod
    def _deploy_stage(classification: BranchClassification) -> StagePlanDTO:
        name = f"Deploy to {classification.environment.value}"
        branch_type = classification.branch_type.value

        if classification.auto_deploy:
            return StagePlanDTO(name=name, enabled=True, reason=f"auto-deploy enabled for {branch_type} branches")

        if classification.branch_type == BranchType.PRODUCTION:
            return StagePlanDTO(
                name=name,
                enabled=True,
                requires_approval=True,
                reason="production deploys require manual approval",
            )

        return StagePlanDTO(name=name, enabled=False, reason=f"auto-deploy disabled for this {branch_type} branch")
