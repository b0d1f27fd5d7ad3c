"""Cargo manager."""

from bricolaje.managers.cargo.cargo import CargoManager
from bricolaje.managers.cargo.results import CreateResult, DeleteResult, UpdateResult

__all__ = ["CargoManager", "CreateResult", "DeleteResult", "UpdateResult"]
