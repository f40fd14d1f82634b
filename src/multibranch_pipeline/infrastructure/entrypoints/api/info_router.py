from fastapi import APIRouter, Depends

from multibranch_pipeline.domain.value_objects.branch_classification import BranchClassification
from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.dependencies import (
    get_classification,
    get_settings,
)
from multibranch_pipeline.infrastructure.entrypoints.api.dtos.demo_responses import InfoResponseDTO

router = APIRouter()


@router.get("/info", response_model=InfoResponseDTO)
def info(
    settings: Settings = Depends(get_settings),
    classification: BranchClassification = Depends(get_classification),
):
    return InfoResponseDTO(
        application=settings.app_name,
        version=settings.app_version,
        branch=settings.branch_name,
        build=settings.build_number,
        environment=classification.environment.value,
    )
