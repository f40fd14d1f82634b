from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "multi-branch-demo"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, gt=0, lt=65536)

    model_config = SettingsConfigDict(env_file=None, extra="ignore")
