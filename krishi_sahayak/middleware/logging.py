"""Structured JSON logging with request ID propagation."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from krishi_sahayak.config import LogFormat, get_settings

_configured = False


def configure_structured_logging() -> None:
	"""Configure stdlib + structlog once per process."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

	timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
	shared_processors: list[Any] = [
		structlog.contextvars.merge_contextvars,
		structlog.processors.add_log_level,
		timestamper,
	]

	if settings.log_format == LogFormat.json:
		renderer: Any = structlog.processors.JSONRenderer(ensure_ascii=False)
		logging.basicConfig(level=log_level, format="%(message)s")
	else:
		renderer = structlog.dev.ConsoleRenderer()
		logging.basicConfig(level=log_level)

	structlog.configure(
		processors=[
			*shared_processors,
			structlog.processors.format_exc_info,
			renderer,
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


_PROBE_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Attach request IDs and log one line per request.

	The line names the matched route template (``/api/crops/{crop_id}``)
	rather than the concrete path, so requests for different crops group
	together. Unmatched paths log ``route=None``.
	"""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
		request.state.request_id = request_id

		# Route-level error logs inherit these contextvars.
		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(request_id=request_id, method=request.method)

		logger = structlog.get_logger("krishi_sahayak.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception as exc:
			logger.exception(
				"http_request_failed",
				route=_route_template(request),
				path=request.url.path,
				duration_ms=_elapsed_ms(start),
				error=str(exc),
			)
			raise

		response.headers["x-request-id"] = request_id
		_log_method(logger, request.url.path, response.status_code)(
			"http_request",
			route=_route_template(request),
			status_code=response.status_code,
			duration_ms=_elapsed_ms(start),
		)
		return response


def _route_template(request: Request) -> str | None:
	route = request.scope.get("route")
	return getattr(route, "path", None)


def _log_method(logger: Any, path: str, status_code: int) -> Any:
	if status_code >= 500:
		return logger.warning
	if path in _PROBE_PATHS:
		return logger.debug
	return logger.info


def _elapsed_ms(start: float) -> float:
	return round((time.perf_counter() - start) * 1000.0, 2)
