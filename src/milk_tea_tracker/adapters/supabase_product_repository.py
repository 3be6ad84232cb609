"""Supabase implementation of the product catalog."""

import re
from dataclasses import dataclass

from supabase import Client

from milk_tea_tracker.domain.products import Product
from milk_tea_tracker.services.catalog import ProductRepository, match_products

# Filter syntax and ``ilike`` wildcards; each run becomes a single ``%``.
_FILTER_UNSAFE = re.compile(r'[,()%*_\\"]+')


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Reads catalog products from the ``tea_products`` table."""

    client: Client

    def search_products(self, query: str, limit: int) -> list[Product]:
        """Search products by name, brand or description."""
        needle = query.strip()
        term = _FILTER_UNSAFE.sub("%", needle).strip("%").strip()
        if not term.replace("%", "").strip():
            return []
        pattern = f"%{term}%"
        request = (
            self.client.table("tea_products")
            .select("*")
            .or_(
                f"name.ilike.{pattern},brand.ilike.{pattern},"
                f"description.ilike.{pattern}"
            )
            .order("rating", desc=True)
        )
        if term == needle:
            request = request.limit(limit)
        response = request.execute()
        products = [_parse_product(row) for row in response.data or []]
        # Wildcards widen the remote match, so rows are rechecked literally.
        return match_products(needle, products, limit)

    def list_products(self) -> list[Product]:
        """Return every product ordered by rating."""
        response = (
            self.client.table("tea_products")
            .select("*")
            .order("rating", desc=True)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def list_by_brand(self, brand: str) -> list[Product]:
        """Return products of a brand ordered by rating."""
        response = (
            self.client.table("tea_products")
            .select("*")
            .eq("brand", brand)
            .order("rating", desc=True)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def list_by_category(self, category: str) -> list[Product]:
        """Return products in a calorie category ordered by rating."""
        response = (
            self.client.table("tea_products")
            .select("*")
            .eq("category", category)
            .order("rating", desc=True)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]


def _parse_product(row: dict[str, object]) -> Product:
    """Parse a ``tea_products`` row into a domain model."""
    ingredients = row.get("ingredients") or []
    return Product(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        brand=str(row.get("brand") or ""),
        calories=float(row.get("base_calories") or 0.0),
        sugar=str(row.get("sugar_content") or ""),
        size=str(row.get("size") or ""),
        ingredients=tuple(str(item) for item in ingredients),
        rating=float(row.get("rating") or 0.0),
        category=str(row.get("category") or "medium"),
        image_url=row.get("image_url"),
        description=row.get("description"),
    )
