from .pipeline_plan_dto import PipelinePlanDTO, StagePlanDTO

__all__ = ["PipelinePlanDTO", "StagePlanDTO"]
