from .demo_responses import EndpointsDTO, HealthResponseDTO, InfoResponseDTO, WelcomeResponseDTO

__all__ = ["EndpointsDTO", "HealthResponseDTO", "InfoResponseDTO", "WelcomeResponseDTO"]
