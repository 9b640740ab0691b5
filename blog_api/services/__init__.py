from blog_api.services.blog import BlogService
from blog_api.services.engagement import EngagementService

__all__ = ["BlogService", "EngagementService"]
