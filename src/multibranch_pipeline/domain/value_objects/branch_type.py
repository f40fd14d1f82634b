from enum import Enum


class BranchType(str, Enum):
    PRODUCTION = "Production"
    STAGING = "Staging"
    FEATURE = "Feature"
    HOTFIX = "Hotfix"
    RELEASE = "Release"
    UNKNOWN = "Unknown"
