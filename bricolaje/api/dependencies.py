"""FastAPI dependencies for the Bricolaje API.

Provides dependency injection for managers bound to the request session.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bricolaje.db.session import get_session_dependency
from bricolaje.managers.cargo import CargoManager


async def get_cargo_manager(
    session: Annotated[AsyncSession, Depends(get_session_dependency)],
) -> CargoManager:
    """Get CargoManager bound to the request's database session."""
    return CargoManager(db_session=session)


# Type aliases for cleaner dependency injection
CargoManagerDep = Annotated[CargoManager, Depends(get_cargo_manager)]
