from multibranch_pipeline.infrastructure.configuration.application.app_settings import AppSettings
from multibranch_pipeline.infrastructure.configuration.pipeline.pipeline_settings import (
    PipelineSettings,
)


class Settings(AppSettings, PipelineSettings):
    """
    Combines all settings.
    Values come from environment variables (BRANCH_NAME, BUILD_NUMBER, PORT, ...).
    Usage:
        settings = Settings()
    """
    pass
