"""Cargo data model.

A Cargo is a job position (role) in the catalogue, identified by a
storage-assigned integer id and a unique human readable description.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Cargo(SQLModel, table=True):
    """Cargo - job position."""

    __tablename__ = "cargos"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Business key, unique across the catalogue
    descripcion: str = Field(unique=True, index=True)
