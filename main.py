# main.py

from uvicorn import run

from blog_api import app

__all__ = ["app"]


def main() -> None:
    run(
        "blog_api:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level="info",
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
