from blog_api.utils.helpers import get_summary, host, today_str, utcnow

__all__ = ["get_summary", "host", "today_str", "utcnow"]
