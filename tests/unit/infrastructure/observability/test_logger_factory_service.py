import io
import logging

import pytest
import structlog
from structlog.contextvars import unbind_contextvars

from multibranch_pipeline.infrastructure.observability import logger_factory_service
from multibranch_pipeline.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    bind_pipeline_context,
    configure_logging,
)


@pytest.fixture
def bridge_formatter():
    LoggerFactoryService.build_logger(__name__)
    return next(
        handler.formatter
        for handler in logging.getLogger().handlers
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
    )


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield root
    root.setLevel(previous)


@pytest.mark.parametrize("log_format", ["json", "JSON"])
def test_log_format_json_selects_json_renderer(monkeypatch, log_format):
    monkeypatch.setenv("LOG_FORMAT", log_format)
    monkeypatch.setenv("APP_ENV", "local")

    assert isinstance(logger_factory_service._select_renderer(), structlog.processors.JSONRenderer)


def test_log_format_console_wins_over_app_env(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "console")
    monkeypatch.setenv("APP_ENV", "production")

    assert isinstance(logger_factory_service._select_renderer(), structlog.dev.ConsoleRenderer)


@pytest.mark.parametrize("app_env", ["qa", "staging", "prod", "production"])
def test_deployed_app_env_selects_json_renderer(monkeypatch, app_env):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.setenv("APP_ENV", app_env)

    assert isinstance(logger_factory_service._select_renderer(), structlog.processors.JSONRenderer)


@pytest.mark.parametrize("app_env", [None, "local", "dev"])
def test_local_app_env_selects_console_renderer(monkeypatch, app_env):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    if app_env is None:
        monkeypatch.delenv("APP_ENV", raising=False)
    else:
        monkeypatch.setenv("APP_ENV", app_env)

    assert isinstance(logger_factory_service._select_renderer(), structlog.dev.ConsoleRenderer)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("bogus", logging.INFO),
    ],
)
def test_resolve_level(level, expected):
    assert logger_factory_service._resolve_level(level) == expected


def test_reconfiguring_only_adjusts_root_level(bridge_formatter, restore_root_level):
    root = restore_root_level
    handlers_before = list(root.handlers)

    configure_logging("WARNING")

    assert root.level == logging.WARNING
    assert root.handlers == handlers_before


def test_pipeline_context_reaches_rendered_output(bridge_formatter):
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(bridge_formatter)
    logger = logging.getLogger("multibranch.pipeline-context")
    logger.propagate = False
    logger.addHandler(handler)

    bind_pipeline_context(branch="develop", build="9", environment="staging")
    try:
        logger.warning("deploying")
    finally:
        unbind_contextvars("pipeline_branch", "pipeline_build", "pipeline_environment")
        logger.removeHandler(handler)

    output = stream.getvalue()
    assert "deploying" in output
    assert "pipeline" in output
    assert "'branch': 'develop'" in output or '"branch": "develop"' in output
    assert "staging" in output
