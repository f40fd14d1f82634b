from pydantic import BaseModel, Field


class EndpointsDTO(BaseModel):
    health: str = "/health"
    info: str = "/info"


class WelcomeResponseDTO(BaseModel):
    message: str = "Hello from Multi-Branch Pipeline Demo!"
    branch: str
    build: str
    environment: str
    timestamp: str
    endpoints: EndpointsDTO = Field(default_factory=EndpointsDTO)


class HealthResponseDTO(BaseModel):
    status: str = "healthy"
    branch: str
    environment: str


class InfoResponseDTO(BaseModel):
    application: str
    version: str
    branch: str
    build: str
    environment: str
