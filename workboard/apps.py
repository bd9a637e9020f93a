import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class WorkboardConfig(AppConfig):
    name = "workboard"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        """Create the process-wide components that views depend on"""
        from workboard.services.notification_service import NotificationRegistry

        self.notification_registry = NotificationRegistry.from_settings()
        logger.info("Notification registry initialised")
