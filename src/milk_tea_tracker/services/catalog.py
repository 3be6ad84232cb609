"""Catalog search with a static fallback."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from milk_tea_tracker.domain.products import Product
from milk_tea_tracker.static_catalog import STATIC_PRODUCTS

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Remote source of catalog products."""

    def search_products(self, query: str, limit: int) -> list[Product]:
        """Search products by name, brand or description."""

    def list_products(self) -> list[Product]:
        """Return every product."""

    def list_by_brand(self, brand: str) -> list[Product]:
        """Return products of a brand."""

    def list_by_category(self, category: str) -> list[Product]:
        """Return products in a calorie category."""


def match_products(query: str, candidates: list[Product], limit: int) -> list[Product]:
    """Return candidates whose name, brand or description contain the query."""
    needle = query.strip().lower()
    if not needle:
        return []
    matches = [
        product
        for product in candidates
        if needle in (product.name or "").lower()
        or needle in (product.brand or "").lower()
        or needle in (product.description or "").lower()
    ]
    return matches[: max(limit, 0)]


@dataclass
class CatalogService:
    """Product lookups that fall back to the built-in catalog."""

    repository: ProductRepository | None = None
    fallback_products: list[Product] = field(
        default_factory=lambda: list(STATIC_PRODUCTS)
    )

    def search(self, query: str, limit: int = 5) -> list[Product]:
        """Search the catalog, using the static list when the remote fails."""
        if not query.strip():
            return []
        if self.repository is not None:
            try:
                return self.repository.search_products(query.strip(), limit)
            except Exception as exc:
                _logger.warning("Catalog search failed, using static list: %s", exc)
        return match_products(query, self.fallback_products, limit)

    def list_all(self) -> list[Product]:
        """Return all products ordered by rating."""
        if self.repository is not None:
            try:
                return self.repository.list_products()
            except Exception as exc:
                _logger.warning("Catalog listing failed, using static list: %s", exc)
        return _by_rating(self.fallback_products)

    def list_by_brand(self, brand: str) -> list[Product]:
        """Return products of one brand ordered by rating."""
        if self.repository is not None:
            try:
                return self.repository.list_by_brand(brand)
            except Exception as exc:
                _logger.warning("Brand lookup failed, using static list: %s", exc)
        return _by_rating(
            [product for product in self.fallback_products if product.brand == brand]
        )

    def list_by_category(self, category: str) -> list[Product]:
        """Return products in a calorie category ordered by rating."""
        if self.repository is not None:
            try:
                return self.repository.list_by_category(category)
            except Exception as exc:
                _logger.warning("Category lookup failed, using static list: %s", exc)
        return _by_rating(
            [
                product
                for product in self.fallback_products
                if product.category == category
            ]
        )

    def get_product(self, product_id: str) -> Product | None:
        """Return a product by id, if present."""
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def list_brands(self) -> list[str]:
        """Return distinct brand names in alphabetical order."""
        return sorted({product.brand for product in self.list_all() if product.brand})


def _by_rating(products: list[Product]) -> list[Product]:
    return sorted(products, key=lambda product: product.rating, reverse=True)
