from .deployment_tag_service import sanitize_tag

__all__ = ["sanitize_tag"]
