from .branch_classifier_service import BranchClassifierService
from .test_profile_service import TestProfileService

__all__ = ["BranchClassifierService", "TestProfileService"]
