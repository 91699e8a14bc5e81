"""Django application configuration for the catalog."""

from django.apps import AppConfig
from django.conf import settings

import structlog

from catalog.logging import setup_logging


class CatalogConfig(AppConfig):
    """Configuration class for the catalog application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "UPlayG catalog"

    def ready(self) -> None:
        """Configure logging once Django settings are loaded.

        With STRUCTLOG_ENABLED off, structlog still routes through the
        standard library so the LOGGING setting decides what is emitted.
        """
        if settings.STRUCTLOG_ENABLED:
            setup_logging()
            return

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.KeyValueRenderer(),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
