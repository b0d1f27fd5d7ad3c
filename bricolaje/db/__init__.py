"""Database layer."""

from bricolaje.db.session import (
    close_db,
    get_async_session,
    get_session_dependency,
    init_db,
    install_sqlite_functions,
)

__all__ = [
    "close_db",
    "get_async_session",
    "get_session_dependency",
    "init_db",
    "install_sqlite_functions",
]
