from pydantic import BaseModel, Field


class StagePlanDTO(BaseModel):
    name: str
    enabled: bool
    requires_approval: bool = False
    reason: str = ""


class PipelinePlanDTO(BaseModel):
    branch: str
    build: str
    branch_type: str
    environment: str
    timeout_minutes: int
    build_retention: int
    notification_channel: str
    auto_deploy: bool
    docker_tag: str
    warning: str | None = None
    stages: list[StagePlanDTO] = Field(default_factory=list)

    def enabled_stage_names(self) -> list[str]:
        return [stage.name for stage in self.stages if stage.enabled]
