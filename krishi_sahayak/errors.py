"""Application error taxonomy and its mapping onto HTTP responses."""

from __future__ import annotations

import structlog
from fastapi import HTTPException, status

logger = structlog.get_logger("krishi_sahayak.errors")


class ValidationError(ValueError):
	"""Payload rejected by the database after schema validation passed."""

	def __init__(self, message: str, field: str | None = None) -> None:
		super().__init__(message)
		self.field = field


class NotFoundError(LookupError):
	"""Requested entity does not exist."""

	def __init__(self, entity: str) -> None:
		super().__init__(f"{entity} not found")
		self.entity = entity


def map_error(exc: Exception, message: str) -> HTTPException:
	"""Translate a storage/route failure into an ``HTTPException``.

	``message`` is the generic text returned for unexpected failures; the
	underlying error is logged, never exposed.
	"""
	if isinstance(exc, HTTPException):
		return exc
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		error: dict[str, object] = {"msg": str(exc)}
		field = getattr(exc, "field", None)
		if field is not None:
			error = {"loc": ["body", field], "msg": str(exc)}
		return HTTPException(
			status_code=status.HTTP_400_BAD_REQUEST,
			detail={"message": "Invalid data", "errors": [error]},
		)
	logger.error("unexpected_failure", message=message, error=str(exc), exc_info=exc)
	return HTTPException(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail=message,
	)
