"""Catalog protocols."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ServiceCategory:
    """Grouping of main products (e.g. "Bil Hovedservice")."""

    id: str
    name: str
    slug: str


@dataclass(frozen=True)
class ProductType:
    """Top-level kind of item being serviced (car, baby-trolley, ...)."""

    id: str
    name: str
    type: str
    image: str | None = None
    selected: bool = False


@dataclass(frozen=True)
class MainProduct:
    """Base service for a product type.

    price is in whole kroner, duration in minutes.
    """

    id: str
    name: str
    description: str
    price: int
    duration: int
    product_type: str
    category: ServiceCategory | None = None
    image: str | None = None


@dataclass(frozen=True)
class Addon:
    """Optional extra for a product type.

    Two variants, told apart by kind:
    - boolean: flat price, toggled on/off
    - quantity: unit_price per unit, quantity within [min, max]
    """

    id: str
    name: str
    kind: str
    product_type: str
    description: str = ""
    price: int | None = None
    unit_price: int | None = None
    min: int | None = None
    max: int | None = None

    @property
    def is_quantity(self) -> bool:
        return self.kind == "quantity"


@runtime_checkable
class CatalogBackend(Protocol):
    """Interface for catalog queries.

    Unknown product types yield empty sequences, never errors.
    """

    def get_main_products(self, product_type: str) -> Sequence[MainProduct]:
        """Return main products for a product type, in catalog order."""
        ...

    def get_addons(self, product_type: str) -> Sequence[Addon]:
        """Return addons for a product type, in catalog order."""
        ...
