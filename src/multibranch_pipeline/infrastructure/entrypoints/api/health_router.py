from fastapi import APIRouter, Depends

from multibranch_pipeline.domain.value_objects.branch_classification import BranchClassification
from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.dependencies import (
    get_classification,
    get_settings,
)
from multibranch_pipeline.infrastructure.entrypoints.api.dtos.demo_responses import HealthResponseDTO

router = APIRouter()


@router.get("/health", response_model=HealthResponseDTO)
def health_check(
    settings: Settings = Depends(get_settings),
    classification: BranchClassification = Depends(get_classification),
):
    return HealthResponseDTO(
        branch=settings.branch_name,
        environment=classification.environment.value,
    )
