"""Bricolaje error types.

Error codes are stable strings for programmatic handling and are rendered
by the application error handler as ``{"error": {...}}``.
"""

from __future__ import annotations

from typing import Any


class BricolajeError(Exception):
    """Base error for all Bricolaje exceptions."""

    code: str = "internal_error"
    message: str = "An internal error occurred"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self, request_id: str | None = None) -> dict[str, Any]:
        """Serialize to the API error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "request_id": request_id,
                "details": self.details,
            }
        }


class NotFoundError(BricolajeError):
    """Resource not found (404)."""

    code = "not_found"
    message = "Resource not found"
    status_code = 404
