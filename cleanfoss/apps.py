from django.apps import AppConfig
from django.core.signals import setting_changed
from django.utils.translation import gettext_lazy as _


def _reset_catalog_backend(sender, setting, **kwargs):
    if setting == "CLEANFOSS":
        from cleanfoss.conf import reset_catalog_backend

        reset_catalog_backend()


class CleanfossConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cleanfoss"
    verbose_name = _("Rengøring og priser")

    def ready(self):
        setting_changed.connect(_reset_catalog_backend, dispatch_uid="cleanfoss_reset_catalog_backend")
