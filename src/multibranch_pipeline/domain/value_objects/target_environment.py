from enum import Enum


class TargetEnvironment(str, Enum):
    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"
    HOTFIX = "hotfix"
    UNKNOWN = "unknown"
