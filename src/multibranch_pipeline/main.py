import uvicorn

from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server with auto-reload."""
    settings = Settings()
    uvicorn.run(
        "multibranch_pipeline.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )

# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
