from fastapi import FastAPI

from multibranch_pipeline.application.core.services.branch_classifier_service import (
    BranchClassifierService,
)
from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from multibranch_pipeline.infrastructure.entrypoints.api.info_router import (
    router as info_router,
)
from multibranch_pipeline.infrastructure.entrypoints.api.welcome_router import (
    router as welcome_router,
)
from multibranch_pipeline.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    bind_pipeline_context,
)
from multibranch_pipeline.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)

logger = LoggerFactoryService.build_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    classification = BranchClassifierService.classify(settings.branch_name)
    bind_pipeline_context(
        branch=settings.branch_name,
        build=settings.build_number,
        environment=classification.environment.value,
    )

    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name} {settings.app_version}")
    logger.info(f"Branch: {settings.branch_name} ({classification.branch_type.value})")
    logger.info(f"Build: {settings.build_number}")
    logger.info(f"Environment: {classification.environment.value}")
    logger.info("------------------------")
    if classification.warning:
        logger.warning(classification.warning)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.classification = classification

    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(info_router)
    # Registered last: it carries the catch-all route.
    app.include_router(welcome_router)

    return app
