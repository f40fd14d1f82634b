import pytest
from fastapi.testclient import TestClient

from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.app_factory import create_app

PIPELINE_ENV_VARS = ("BRANCH_NAME", "BUILD_NUMBER", "PORT", "HOST", "LOG_LEVEL", "APP_NAME", "APP_VERSION")


@pytest.fixture(autouse=True)
def clean_pipeline_env(monkeypatch):
    for name in PIPELINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    def _make(**overrides):
        return Settings(**overrides)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings(branch_name="feature/login", build_number="42")


@pytest.fixture
def make_client(make_settings):
    def _make(**overrides):
        return TestClient(create_app(make_settings(**overrides)))

    return _make


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
