"""Enumerations shared by the engine and the models."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ProductTypeKey(models.TextChoices):
    """Kind of item being serviced."""

    CAR = "car", _("Bil")
    BABY_TROLLEY = "baby-trolley", _("Barnevogn")
    MOTORCYCLE = "motorcycle", _("Motorcykel")
    YACHT = "yacht", _("Båd")


class VehicleSize(models.TextChoices):
    """Car size category, drives the main product price multiplier."""

    MINI = "mini", _("Mini")
    MELLEM = "mellem", _("Mellem")
    SEDAN = "sedan", _("Sedan")
    STATIONCAR = "stationcar", _("Stationcar")
    SUV = "suv", _("SUV")
    MPV = "mpv", _("MPV")
    VAREVOGN = "varevogn", _("Varevogn")


class AddonKind(models.TextChoices):
    """Boolean addons have a flat price, quantity addons a unit price."""

    BOOLEAN = "boolean", _("Til/fra")
    QUANTITY = "quantity", _("Antal")


class LineItemType(models.TextChoices):
    MAIN_PRODUCT = "main-product", _("Hovedprodukt")
    ADDON = "addon", _("Tilvalg")
    DISCOUNT = "discount", _("Rabat")
