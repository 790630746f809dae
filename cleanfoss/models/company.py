"""Company model."""

import uuid as uuid_lib

from django.db import models
from django.utils.translation import gettext_lazy as _


class Company(models.Model):
    """
    Tenant offering cleaning services.

    Each company may publish its own main products and addons; catalog rows
    without a company form the shared catalog.
    """

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    slug = models.SlugField(max_length=50, unique=True, verbose_name=_("slug"))
    name = models.CharField(max_length=200, verbose_name=_("navn"))
    is_active = models.BooleanField(default=True, verbose_name=_("aktiv"))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("oprettet"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("opdateret"))

    class Meta:
        verbose_name = _("virksomhed")
        verbose_name_plural = _("virksomheder")
        ordering = ["name"]

    def __str__(self):
        return self.name
