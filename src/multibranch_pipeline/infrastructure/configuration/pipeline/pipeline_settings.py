from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

UNKNOWN = "unknown"


class PipelineSettings(BaseSettings):
    # Set by the CI engine for every run
    branch_name: str = Field(default=UNKNOWN, description="Branch being built, e.g. feature/login")
    build_number: str = Field(default=UNKNOWN, description="Run number of the current build")

    @field_validator("branch_name", "build_number", mode="before")
    @classmethod
    def _default_when_blank(cls, value: Any) -> str:
        if value is None:
            return UNKNOWN
        text = str(value)
        return text if text else UNKNOWN

    model_config = SettingsConfigDict(env_file=None, extra="ignore")
