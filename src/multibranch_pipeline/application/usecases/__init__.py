from .pipeline.build_pipeline_plan_usecase import BuildPipelinePlanUseCase
from .testing.run_simulated_tests_usecase import RunSimulatedTestsUseCase

__all__ = ["BuildPipelinePlanUseCase", "RunSimulatedTestsUseCase"]
