"""CargoManager - manages the cargo catalogue in storage.

Write operations report their outcome as a result kind instead of raising;
only lookups of a single cargo raise (NotFoundError).
"""

from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bricolaje.config import get_settings
from bricolaje.errors import NotFoundError
from bricolaje.managers.cargo.results import CreateResult, DeleteResult, UpdateResult
from bricolaje.models.cargo import Cargo

logger = structlog.get_logger()

# Largest id an INTEGER primary key can hold
MAX_CARGO_ID = 2**63 - 1


def _valid_id(cargo_id: int | None) -> bool:
    return cargo_id is not None and 1 <= cargo_id <= MAX_CARGO_ID


def _normalize_descripcion(descripcion: str | None) -> str | None:
    if descripcion is None:
        return None
    return descripcion.strip() or None


class CargoManager:
    """Manages cargo lifecycle and storage."""

    def __init__(self, db_session: AsyncSession) -> None:
        self._db = db_session
        self._log = logger.bind(manager="cargo")
        self._settings = get_settings()

    def _too_long(self, descripcion: str) -> bool:
        return len(descripcion) > self._settings.cargo.descripcion_max_length

    async def _find_by_id(self, cargo_id: int) -> Cargo | None:
        result = await self._db.execute(select(Cargo).where(Cargo.id == cargo_id))
        return result.scalars().first()

    async def _list(self, query) -> list[Cargo]:
        result = await self._db.execute(query.order_by(Cargo.id))
        return list(result.scalars().all())

    async def create(self, cargo: Cargo) -> CreateResult:
        """Create a new cargo.

        Args:
            cargo: Cargo to store. Its id must be unset, storage assigns it.

        Returns:
            CreateResult.OK, or the reason the cargo was not stored.
        """
        if cargo.id is not None:
            self._log.info("cargo.create.rejected", reason="id_not_allowed", cargo_id=cargo.id)
            return CreateResult.ID_NOT_ALLOWED

        descripcion = _normalize_descripcion(cargo.descripcion)
        if descripcion is None:
            self._log.info("cargo.create.rejected", reason="missing_description")
            return CreateResult.MISSING_DESCRIPTION

        if self._too_long(descripcion):
            self._log.info(
                "cargo.create.rejected",
                reason="description_too_long",
                length=len(descripcion),
            )
            return CreateResult.PERSISTENCE_FAILURE

        existing = await self.list_by_exact_description(descripcion)
        if existing:
            self._log.info(
                "cargo.create.rejected",
                reason="duplicate_description",
                descripcion=descripcion,
                existing_id=existing[0].id,
            )
            return CreateResult.DUPLICATE_DESCRIPTION

        record = Cargo(descripcion=descripcion)
        self._db.add(record)
        try:
            await self._db.commit()
        except IntegrityError:
            # Lost a race against a concurrent create with the same description
            await self._db.rollback()
            self._log.info(
                "cargo.create.rejected",
                reason="duplicate_description",
                descripcion=descripcion,
            )
            return CreateResult.DUPLICATE_DESCRIPTION
        except SQLAlchemyError:
            await self._db.rollback()
            self._log.exception("cargo.persistence_failed", operation="create")
            return CreateResult.PERSISTENCE_FAILURE

        await self._db.refresh(record)
        self._log.info("cargo.create", cargo_id=record.id, descripcion=descripcion)
        return CreateResult.OK

    async def get(self, cargo_id: int) -> Cargo:
        """Get cargo by ID.

        Raises:
            NotFoundError: If no cargo has this id
        """
        cargo = await self._find_by_id(cargo_id) if _valid_id(cargo_id) else None
        if cargo is None:
            raise NotFoundError(f"Cargo not found: {cargo_id}")
        return cargo

    async def update(self, cargo: Cargo) -> UpdateResult:
        """Replace the stored cargo with the same id.

        Args:
            cargo: New state of the cargo. ``cargo.id`` selects the record.

        Returns:
            UpdateResult.OK, or the reason the cargo was not updated.
        """
        if not _valid_id(cargo.id):
            self._log.info("cargo.update.rejected", reason="invalid_id", cargo_id=cargo.id)
            return UpdateResult.INVALID_ID

        record = await self._find_by_id(cargo.id)
        if record is None:
            self._log.info("cargo.update.rejected", reason="not_found", cargo_id=cargo.id)
            return UpdateResult.NOT_FOUND

        descripcion = _normalize_descripcion(cargo.descripcion)
        if descripcion is None or self._too_long(descripcion):
            self._log.info(
                "cargo.update.rejected",
                reason="unstorable_description",
                cargo_id=cargo.id,
            )
            return UpdateResult.PERSISTENCE_FAILURE

        record.descripcion = descripcion
        try:
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            self._log.exception(
                "cargo.persistence_failed",
                operation="update",
                cargo_id=cargo.id,
            )
            return UpdateResult.PERSISTENCE_FAILURE

        self._log.info("cargo.update", cargo_id=cargo.id, descripcion=descripcion)
        return UpdateResult.OK

    async def delete(self, cargo_id: int) -> DeleteResult:
        """Hard-delete a cargo."""
        if not _valid_id(cargo_id):
            self._log.info("cargo.delete.rejected", reason="invalid_id", cargo_id=cargo_id)
            return DeleteResult.INVALID_ID

        record = await self._find_by_id(cargo_id)
        if record is None:
            self._log.info("cargo.delete.rejected", reason="not_found", cargo_id=cargo_id)
            return DeleteResult.NOT_FOUND

        await self._db.delete(record)
        await self._db.commit()

        self._log.info("cargo.delete", cargo_id=cargo_id)
        return DeleteResult.OK

    async def list_all(self) -> list[Cargo]:
        """List every cargo, ordered by id."""
        return await self._list(select(Cargo))

    async def list_by_exact_description(self, descripcion: str) -> list[Cargo]:
        """List cargos whose description equals ``descripcion`` exactly."""
        return await self._list(select(Cargo).where(Cargo.descripcion == descripcion))

    async def list_by_description_contains(self, descripcion: str) -> list[Cargo]:
        """List cargos whose description contains ``descripcion``, ignoring case.

        Case folding is Unicode aware (see install_sqlite_functions). LIKE
        wildcards in ``descripcion`` are matched literally.
        """
        return await self._list(
            select(Cargo).where(Cargo.descripcion.icontains(descripcion, autoescape=True))
        )
