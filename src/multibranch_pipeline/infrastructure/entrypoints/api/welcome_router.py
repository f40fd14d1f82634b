from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from multibranch_pipeline.domain.value_objects.branch_classification import BranchClassification
from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.dependencies import (
    get_classification,
    get_settings,
)
from multibranch_pipeline.infrastructure.entrypoints.api.dtos.demo_responses import WelcomeResponseDTO

router = APIRouter()


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/", response_model=WelcomeResponseDTO)
def welcome(
    settings: Settings = Depends(get_settings),
    classification: BranchClassification = Depends(get_classification),
):
    return WelcomeResponseDTO(
        branch=settings.branch_name,
        build=settings.build_number,
        environment=classification.environment.value,
        timestamp=_utc_timestamp(),
    )


# Unmatched paths answer with the welcome document; include this router last.
@router.get("/{full_path:path}", response_model=WelcomeResponseDTO, include_in_schema=False)
def fallback(
    full_path: str,
    settings: Settings = Depends(get_settings),
    classification: BranchClassification = Depends(get_classification),
):
    return welcome(settings, classification)
