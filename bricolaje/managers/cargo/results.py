"""Result kinds returned by CargoManager write operations.

Each operation owns its own code space. The integer values are part of the
HTTP contract: the controller sends them verbatim as the response body.
"""

from __future__ import annotations

from enum import IntEnum


class CreateResult(IntEnum):
    """Outcome of CargoManager.create."""

    OK = 0
    ID_NOT_ALLOWED = 1
    MISSING_DESCRIPTION = 2
    PERSISTENCE_FAILURE = 3
    DUPLICATE_DESCRIPTION = 4


class UpdateResult(IntEnum):
    """Outcome of CargoManager.update."""

    OK = 0
    INVALID_ID = 1
    NOT_FOUND = 2
    PERSISTENCE_FAILURE = 3


class DeleteResult(IntEnum):
    """Outcome of CargoManager.delete."""

    OK = 0
    INVALID_ID = 1
    NOT_FOUND = 2
