from blog_api.routes.activity import router as activity_router
from blog_api.routes.admin import router as admin_router
from blog_api.routes.blog import router as blog_router
from blog_api.routes.contact import router as contact_router
from blog_api.routes.review import router as review_router
from blog_api.routes.subscriber import router as subscriber_router
from blog_api.routes.upload import router as upload_router
from blog_api.routes.user import router as user_router

__all__ = [
    "activity_router",
    "admin_router",
    "blog_router",
    "contact_router",
    "review_router",
    "subscriber_router",
    "upload_router",
    "user_router",
]
