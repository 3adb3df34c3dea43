"""
Observability hooks.
Exceptions surfaced by the exception handlers are reported here.
"""

from fastapi import Request
import logging

from pogoklink.core.config import settings

logger = logging.getLogger(__name__)


def setup_observability() -> None:
    """
    Announce the observability target for this process.

    Traces and metrics exporters are not wired yet; the OTLP endpoint and
    service name are logged so deployments can confirm their configuration.
    """
    logger.info(
        "Setting up observability",
        extra={
            "otel_endpoint": settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            "service_name": settings.OTEL_SERVICE_NAME,
        },
    )


def record_exception(exc: Exception, request: Request) -> None:
    """
    Record an exception in the observability backend.

    Args:
        exc: The exception that occurred
        request: The FastAPI request object
    """
    logger.error(
        f"Exception recorded: {type(exc).__name__}",
        extra={
            "exception_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )
