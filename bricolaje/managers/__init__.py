"""Manager layer - business logic."""

from bricolaje.managers.cargo import CargoManager

__all__ = ["CargoManager"]
