"""
App configuration for Source Code Store.
"""

import logging
import os

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class SourceCodeStoreConfig(AppConfig):
    """App configuration for SourceCodeStore."""

    name = "SourceCodeStore"
    verbose_name = "Source Code Store"

    def ready(self):
        """Load store settings, set up observability and register event handlers."""
        from core.config import get_store_settings

        get_store_settings()

        # Django's autoreloader runs ready() in both processes
        if os.environ.get("RUN_MAIN") == "false":
            return

        from core.infrastructure.event_handlers import register_event_handlers
        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()
        register_event_handlers()
        logger.info("Source Code Store ready")
