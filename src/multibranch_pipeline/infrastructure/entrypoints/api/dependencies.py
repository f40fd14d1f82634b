from fastapi import Request

from multibranch_pipeline.domain.value_objects.branch_classification import BranchClassification
from multibranch_pipeline.infrastructure.configuration.main_settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_classification(request: Request) -> BranchClassification:
    """Classification computed once in create_app()."""
    return request.app.state.classification
