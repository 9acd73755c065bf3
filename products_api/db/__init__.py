"""Database package — async SQLAlchemy engine, session factory, Base."""
from products_api.db.base import (
    Base,
    async_session_factory,
    dispose_db,
    engine,
    get_db,
    init_db,
)

__all__ = ["Base", "async_session_factory", "dispose_db", "engine", "get_db", "init_db"]
