import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class MadrasaAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'madrasa_app'
    verbose_name = 'Madrasa CRM'

    def ready(self):
        if getattr(settings, 'MADRASA_ALLOW_UNAUTHENTICATED', False):
            logger.warning(
                "MADRASA_ALLOW_UNAUTHENTICATED is on: admin routes accept requests "
                "without a valid token. Turn it off outside demo deployments."
            )
