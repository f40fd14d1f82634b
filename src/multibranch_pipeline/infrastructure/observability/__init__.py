from .logger_factory_service import (
    LoggerFactoryService,
    bind_pipeline_context,
    configure_logging,
)

__all__ = [
    "LoggerFactoryService",
    "bind_pipeline_context",
    "configure_logging",
]
