"""Structlog-based logging configuration with the pipeline log schema and stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- bind_pipeline_context(): attaches branch/build/environment to every later event
- LoggerFactoryService: facade returning stdlib loggers
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars

from multibranch_pipeline.infrastructure.observability.logging.pipeline_schema_processor import (
    pipeline_schema_processor,
)

_CONFIGURED = False


def configure_logging(level: str | int = logging.INFO) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; later invocations only adjust the root level.
    Renderer is selected by LOG_FORMAT env (json|console) or APP_ENV.
    Output goes to stderr so stdout stays machine-readable for the CLI.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        logging.getLogger().setLevel(_resolve_level(level))
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        pipeline_schema_processor,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route logging.getLogger() output through structlog pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def bind_pipeline_context(branch: str, build: str, environment: str) -> None:
    """Bind the run identity so every event of this process carries it."""
    bind_contextvars(
        pipeline_branch=branch,
        pipeline_build=build,
        pipeline_environment=environment,
    )


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _select_renderer() -> Any:
    """Choose renderer based on LOG_FORMAT env or APP_ENV."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)

    env = os.environ.get("APP_ENV", "local").lower()
    if env in ("qa", "staging", "prod", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


class LoggerFactoryService:
    """Facade for modules that log through the stdlib API."""

    @staticmethod
    def configure_root_logger(level: str | int = logging.INFO) -> None:
        configure_logging(level)

    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        """Return a stdlib logger (routed through structlog via ProcessorFormatter)."""
        if not _CONFIGURED:
            configure_logging()
        return logging.getLogger(name)
