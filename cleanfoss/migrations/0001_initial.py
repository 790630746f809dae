# Generated manually for the initial catalog schema

import uuid

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


PRODUCT_TYPE_CHOICES = [
    ("car", "Bil"),
    ("baby-trolley", "Barnevogn"),
    ("motorcycle", "Motorcykel"),
    ("yacht", "Båd"),
]

ADDON_KIND_CHOICES = [
    ("boolean", "Til/fra"),
    ("quantity", "Antal"),
]

HISTORY_TYPE_CHOICES = [("+", "Created"), ("~", "Changed"), ("-", "Deleted")]


def _main_product_fields(historical):
    return [
        ("uuid", models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name="UUID")
         if historical else
         models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID")),
        ("code", models.SlugField(verbose_name="kode")),
        ("product_type", models.CharField(choices=PRODUCT_TYPE_CHOICES, db_index=True, max_length=20, verbose_name="produkttype")),
        ("name", models.CharField(max_length=200, verbose_name="navn")),
        ("description", models.TextField(blank=True, verbose_name="beskrivelse")),
        (
            "price",
            models.BigIntegerField(
                default=0,
                help_text="Pris i hele kroner inkl. moms",
                validators=[django.core.validators.MinValueValidator(0)],
                verbose_name="pris",
            ),
        ),
        ("duration_minutes", models.PositiveIntegerField(default=60, verbose_name="varighed (minutter)")),
        ("image", models.CharField(blank=True, max_length=255, verbose_name="billede")),
        ("sort_order", models.IntegerField(default=0, verbose_name="rækkefølge")),
        ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="aktiv")),
        ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="oprettet")
         if historical else
         models.DateTimeField(auto_now_add=True, verbose_name="oprettet")),
        ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="opdateret")
         if historical else
         models.DateTimeField(auto_now=True, verbose_name="opdateret")),
    ]


def _addon_fields(historical):
    return [
        ("uuid", models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name="UUID")
         if historical else
         models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID")),
        ("code", models.SlugField(verbose_name="kode")),
        ("product_type", models.CharField(choices=PRODUCT_TYPE_CHOICES, db_index=True, max_length=20, verbose_name="produkttype")),
        ("kind", models.CharField(choices=ADDON_KIND_CHOICES, default="boolean", max_length=10, verbose_name="type")),
        ("name", models.CharField(max_length=200, verbose_name="navn")),
        ("description", models.TextField(blank=True, verbose_name="beskrivelse")),
        (
            "price",
            models.BigIntegerField(
                blank=True,
                help_text="Fast pris (til/fra-tilvalg)",
                null=True,
                validators=[django.core.validators.MinValueValidator(0)],
                verbose_name="pris",
            ),
        ),
        (
            "unit_price",
            models.BigIntegerField(
                blank=True,
                help_text="Pris pr. stk. (antal-tilvalg)",
                null=True,
                validators=[django.core.validators.MinValueValidator(0)],
                verbose_name="stykpris",
            ),
        ),
        ("min_qty", models.PositiveSmallIntegerField(default=1, verbose_name="min. antal")),
        ("max_qty", models.PositiveSmallIntegerField(default=1, verbose_name="maks. antal")),
        ("sort_order", models.IntegerField(default=0, verbose_name="rækkefølge")),
        ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="aktiv")),
        ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="oprettet")
         if historical else
         models.DateTimeField(auto_now_add=True, verbose_name="oprettet")),
        ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="opdateret")
         if historical else
         models.DateTimeField(auto_now=True, verbose_name="opdateret")),
    ]


def _history_fields():
    return [
        ("history_id", models.AutoField(primary_key=True, serialize=False)),
        ("history_date", models.DateTimeField(db_index=True)),
        ("history_change_reason", models.CharField(max_length=100, null=True)),
        ("history_type", models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1)),
        (
            "history_user",
            models.ForeignKey(
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to=settings.AUTH_USER_MODEL,
            ),
        ),
        (
            "company",
            models.ForeignKey(
                blank=True,
                db_constraint=False,
                help_text="Tom = fælles katalog",
                null=True,
                on_delete=django.db.models.deletion.DO_NOTHING,
                related_name="+",
                to="cleanfoss.company",
                verbose_name="virksomhed",
            ),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID")),
                ("slug", models.SlugField(unique=True, verbose_name="slug")),
                ("name", models.CharField(max_length=200, verbose_name="navn")),
                ("is_active", models.BooleanField(default=True, verbose_name="aktiv")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="oprettet")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="opdateret")),
            ],
            options={
                "verbose_name": "virksomhed",
                "verbose_name_plural": "virksomheder",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ServiceCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(unique=True, verbose_name="slug")),
                ("name", models.CharField(max_length=100, verbose_name="navn")),
                ("sort_order", models.IntegerField(default=0, verbose_name="rækkefølge")),
            ],
            options={
                "verbose_name": "servicekategori",
                "verbose_name_plural": "servicekategorier",
                "ordering": ["sort_order", "name"],
            },
        ),
        migrations.CreateModel(
            name="MainProduct",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *_main_product_fields(historical=False),
                (
                    "company",
                    models.ForeignKey(
                        blank=True,
                        help_text="Tom = fælles katalog",
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="main_products",
                        to="cleanfoss.company",
                        verbose_name="virksomhed",
                    ),
                ),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="main_products",
                        to="cleanfoss.servicecategory",
                        verbose_name="kategori",
                    ),
                ),
            ],
            options={
                "verbose_name": "hovedprodukt",
                "verbose_name_plural": "hovedprodukter",
                "ordering": ["product_type", "sort_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="Addon",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *_addon_fields(historical=False),
                (
                    "company",
                    models.ForeignKey(
                        blank=True,
                        help_text="Tom = fælles katalog",
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="addons",
                        to="cleanfoss.company",
                        verbose_name="virksomhed",
                    ),
                ),
            ],
            options={
                "verbose_name": "tilvalg",
                "verbose_name_plural": "tilvalg",
                "ordering": ["product_type", "sort_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalMainProduct",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                *_main_product_fields(historical=True),
                *_history_fields(),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="cleanfoss.servicecategory",
                        verbose_name="kategori",
                    ),
                ),
            ],
            options={
                "verbose_name": "historical hovedprodukt",
                "verbose_name_plural": "historical hovedprodukter",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="HistoricalAddon",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                *_addon_fields(historical=True),
                *_history_fields(),
            ],
            options={
                "verbose_name": "historical tilvalg",
                "verbose_name_plural": "historical tilvalg",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.AddConstraint(
            model_name="mainproduct",
            constraint=models.UniqueConstraint(fields=("company", "code"), name="unique_main_product_company_code"),
        ),
        migrations.AddConstraint(
            model_name="mainproduct",
            constraint=models.UniqueConstraint(
                condition=models.Q(("company__isnull", True)),
                fields=("code",),
                name="unique_shared_main_product_code",
            ),
        ),
        migrations.AddConstraint(
            model_name="addon",
            constraint=models.UniqueConstraint(fields=("company", "code"), name="unique_addon_company_code"),
        ),
        migrations.AddConstraint(
            model_name="addon",
            constraint=models.UniqueConstraint(
                condition=models.Q(("company__isnull", True)),
                fields=("code",),
                name="unique_shared_addon_code",
            ),
        ),
    ]
