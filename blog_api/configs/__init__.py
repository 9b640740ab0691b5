from blog_api.configs.settings import (
    DEV_IDENTITY_NAME,
    DEV_IDENTITY_UID,
    Settings,
    file_logger,
    pool_kwargs,
    settings,
)

__all__ = [
    "DEV_IDENTITY_NAME",
    "DEV_IDENTITY_UID",
    "Settings",
    "file_logger",
    "pool_kwargs",
    "settings",
]
