"""
Logging and request correlation for the blog backend.

Usage
-----
>>> from blog_api.monitoring import configure_logging
>>> configure_logging()
"""

from blog_api.monitoring.logging import (
    bind_request_context,
    bind_user_id,
    clear_context,
    configure_logging,
    get_request_id,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_context",
    "bind_user_id",
    "clear_context",
    "configure_logging",
    "get_request_id",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
]
