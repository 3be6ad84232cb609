"""Domain models for the milk tea product catalog."""

from dataclasses import dataclass, field

INGREDIENT_PREVIEW_LIMIT = 3
CATEGORIES = ("low", "medium", "high")


@dataclass(frozen=True)
class Product:
    """Represents a catalog drink with its reference calorie value."""

    id: str
    name: str
    brand: str
    calories: float = 0.0
    sugar: str = ""
    size: str = ""
    ingredients: tuple[str, ...] = field(default_factory=tuple)
    rating: float = 0.0
    category: str = "medium"
    image_url: str | None = None
    description: str | None = None

    def ingredient_preview(
        self, limit: int = INGREDIENT_PREVIEW_LIMIT
    ) -> tuple[list[str], int]:
        """Return the first ingredients and the count of hidden ones."""
        shown = list(self.ingredients[:limit])
        return shown, max(len(self.ingredients) - limit, 0)


@dataclass(frozen=True)
class Recommendation:
    """Lowest-calorie and balanced picks for a result set."""

    lowest_calorie: Product | None
    balanced: Product | None
