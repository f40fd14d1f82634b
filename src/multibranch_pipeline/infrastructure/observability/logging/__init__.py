from multibranch_pipeline.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from multibranch_pipeline.infrastructure.observability.logging.pipeline_schema_processor import (
    pipeline_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "pipeline_schema_processor",
]
