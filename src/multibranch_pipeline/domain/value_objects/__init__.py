from .branch_classification import BranchClassification, BranchPolicy
from .branch_type import BranchType
from .target_environment import TargetEnvironment
from .test_profile import TestProfile

__all__ = [
    "BranchClassification",
    "BranchPolicy",
    "BranchType",
    "TargetEnvironment",
    "TestProfile",
]
