"""ServiceCategory, MainProduct and Addon models."""

import uuid as uuid_lib

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from cleanfoss.choices import AddonKind, ProductTypeKey


def _notify_price_changes(instance, old_values: dict | None, fields: tuple[str, ...]) -> None:
    """Send price_changed for each price field that differs from old_values."""
    if not old_values:
        return
    from cleanfoss.signals import price_changed

    for field in fields:
        old_price = old_values[field]
        new_price = getattr(instance, field)
        if old_price != new_price:
            price_changed.send(
                sender=instance.__class__,
                instance=instance,
                company_slug=instance.company.slug if instance.company_id else None,
                code=instance.code,
                field=field,
                old_price=old_price,
                new_price=new_price,
            )


class ServiceCategory(models.Model):
    """Grouping of main products (e.g. "Premium Bil")."""

    slug = models.SlugField(max_length=50, unique=True, verbose_name=_("slug"))
    name = models.CharField(max_length=100, verbose_name=_("navn"))
    sort_order = models.IntegerField(default=0, verbose_name=_("rækkefølge"))

    class Meta:
        verbose_name = _("servicekategori")
        verbose_name_plural = _("servicekategorier")
        ordering = ["sort_order", "name"]

    def __str__(self):
        return self.name


class MainProduct(models.Model):
    """Base cleaning service for a product type."""

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    company = models.ForeignKey(
        "cleanfoss.Company",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="main_products",
        verbose_name=_("virksomhed"),
        help_text=_("Tom = fælles katalog"),
    )
    code = models.SlugField(max_length=50, verbose_name=_("kode"))
    product_type = models.CharField(
        max_length=20,
        choices=ProductTypeKey.choices,
        db_index=True,
        verbose_name=_("produkttype"),
    )
    name = models.CharField(max_length=200, verbose_name=_("navn"))
    description = models.TextField(blank=True, verbose_name=_("beskrivelse"))

    # Whole kroner, VAT included
    price = models.BigIntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name=_("pris"),
        help_text=_("Pris i hele kroner inkl. moms"),
    )
    duration_minutes = models.PositiveIntegerField(default=60, verbose_name=_("varighed (minutter)"))
    image = models.CharField(max_length=255, blank=True, verbose_name=_("billede"))
    category = models.ForeignKey(
        ServiceCategory,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name="main_products",
        verbose_name=_("kategori"),
    )

    sort_order = models.IntegerField(default=0, verbose_name=_("rækkefølge"))
    is_active = models.BooleanField(default=True, db_index=True, verbose_name=_("aktiv"))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("oprettet"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("opdateret"))

    # History tracking (price changes audit)
    history = HistoricalRecords()

    class Meta:
        verbose_name = _("hovedprodukt")
        verbose_name_plural = _("hovedprodukter")
        ordering = ["product_type", "sort_order", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["company", "code"],
                name="unique_main_product_company_code",
            ),
            models.UniqueConstraint(
                fields=["code"],
                condition=models.Q(company__isnull=True),
                name="unique_shared_main_product_code",
            ),
        ]

    def __str__(self):
        return f"{self.code} - {self.name}"

    def save(self, *args, **kwargs):
        self.full_clean()
        old_values = None
        if not self._state.adding:
            old_values = MainProduct.objects.filter(pk=self.pk).values("price").first()
        super().save(*args, **kwargs)
        _notify_price_changes(self, old_values, ("price",))


class Addon(models.Model):
    """
    Optional extra service for a product type.

    BOOLEAN addons need price; QUANTITY addons need unit_price and
    1 <= min_qty <= max_qty.
    """

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    company = models.ForeignKey(
        "cleanfoss.Company",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="addons",
        verbose_name=_("virksomhed"),
        help_text=_("Tom = fælles katalog"),
    )
    code = models.SlugField(max_length=50, verbose_name=_("kode"))
    product_type = models.CharField(
        max_length=20,
        choices=ProductTypeKey.choices,
        db_index=True,
        verbose_name=_("produkttype"),
    )
    kind = models.CharField(
        max_length=10,
        choices=AddonKind.choices,
        default=AddonKind.BOOLEAN,
        verbose_name=_("type"),
    )
    name = models.CharField(max_length=200, verbose_name=_("navn"))
    description = models.TextField(blank=True, verbose_name=_("beskrivelse"))

    price = models.BigIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        verbose_name=_("pris"),
        help_text=_("Fast pris (til/fra-tilvalg)"),
    )
    unit_price = models.BigIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        verbose_name=_("stykpris"),
        help_text=_("Pris pr. stk. (antal-tilvalg)"),
    )
    min_qty = models.PositiveSmallIntegerField(default=1, verbose_name=_("min. antal"))
    max_qty = models.PositiveSmallIntegerField(default=1, verbose_name=_("maks. antal"))

    sort_order = models.IntegerField(default=0, verbose_name=_("rækkefølge"))
    is_active = models.BooleanField(default=True, db_index=True, verbose_name=_("aktiv"))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("oprettet"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("opdateret"))

    history = HistoricalRecords()

    class Meta:
        verbose_name = _("tilvalg")
        verbose_name_plural = _("tilvalg")
        ordering = ["product_type", "sort_order", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["company", "code"],
                name="unique_addon_company_code",
            ),
            models.UniqueConstraint(
                fields=["code"],
                condition=models.Q(company__isnull=True),
                name="unique_shared_addon_code",
            ),
        ]

    def __str__(self):
        return f"{self.code} - {self.name}"

    @property
    def is_quantity(self) -> bool:
        return self.kind == AddonKind.QUANTITY

    def clean(self):
        """Validation: price field matching kind, sane quantity bounds."""
        if self.is_quantity:
            if self.unit_price is None:
                raise ValidationError({"unit_price": "Quantity addons need a unit price."})
            if self.min_qty < 1:
                raise ValidationError({"min_qty": "Minimum quantity must be at least 1."})
            if self.max_qty < self.min_qty:
                raise ValidationError({"max_qty": "Maximum quantity is below the minimum."})
        elif self.price is None:
            raise ValidationError({"price": "Boolean addons need a price."})

    def save(self, *args, **kwargs):
        self.full_clean()
        old_values = None
        if not self._state.adding:
            old_values = Addon.objects.filter(pk=self.pk).values("price", "unit_price").first()
        super().save(*args, **kwargs)
        _notify_price_changes(self, old_values, ("price", "unit_price"))
