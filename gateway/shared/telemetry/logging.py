"""Logging configuration for the application."""

import logging
import sys

from gateway.core.config import get_settings
from gateway.core.tenant_context import get_tenant_id


class TenantContextFilter(logging.Filter):
    """Attach the current request's tenant id (or "-") to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.tenant_id = get_tenant_id() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else settings.log_level.upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(TenantContextFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [tenant=%(tenant_id)s] %(message)s",
        handlers=[handler],
    )
