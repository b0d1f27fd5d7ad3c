"""SQLModel data models."""

from bricolaje.models.cargo import Cargo

__all__ = ["Cargo"]
