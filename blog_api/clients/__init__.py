from blog_api.clients.image_host import ImageHostClient, strip_data_url

__all__ = ["ImageHostClient", "strip_data_url"]
