"""Log schema processor for structlog.

Transforms the flat structlog event_dict into the nested JSON document
shipped by the pipeline and the demo server. Field extraction uses
dict.pop(key, default) so missing keys never raise.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, environment, IDs."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "multi-branch-demo"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract processing metrics block."""
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
        "http_status": event_dict.pop("processing_http_status", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract request/execution context block."""
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    method = event_dict.pop("context_method", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": method,
    }


def _build_pipeline(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract the branch/build identity bound by bind_pipeline_context()."""
    branch = event_dict.pop("pipeline_branch", None)
    build = event_dict.pop("pipeline_build", None)
    environment = event_dict.pop("pipeline_environment", None)
    if branch is None and build is None and environment is None:
        return None
    return {
        "branch": branch,
        "build": build,
        "target_environment": environment,
    }


def pipeline_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that reshapes the flat event_dict into the pipeline schema."""
    result = _build_root_fields(event_dict)

    for key, builder in (
        ("processing", _build_processing),
        ("error", _build_error),
        ("context", _build_context),
        ("pipeline", _build_pipeline),
    ):
        block = builder(event_dict)
        if block is not None:
            result[key] = block

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
