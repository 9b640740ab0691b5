"""Store session management."""

from blog_api.db.database import (
    SessionMaker,
    close_db,
    create_engine,
    create_session_maker,
    get_session,
    init_db,
    transaction,
)

__all__ = [
    "SessionMaker",
    "close_db",
    "create_engine",
    "create_session_maker",
    "get_session",
    "init_db",
    "transaction",
]
