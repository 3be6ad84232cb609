"""Pydantic models for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, Field

from milk_tea_tracker.domain.budget import BudgetStatus
from milk_tea_tracker.domain.products import Product
from milk_tea_tracker.domain.stats import RecordStats

CupSize = Literal["small", "medium", "large"]
Mood = Literal["happy", "relaxed", "conflicted", "celebrating"]


class ProductOut(BaseModel):
    """Catalog product as returned by the API."""

    id: str
    name: str
    brand: str
    calories: float
    sugar: str
    size: str
    ingredients: list[str]
    rating: float
    category: str
    image_url: str | None = None
    description: str | None = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductOut":
        """Build the response model from a domain product."""
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            calories=product.calories,
            sugar=product.sugar,
            size=product.size,
            ingredients=list(product.ingredients),
            rating=product.rating,
            category=product.category,
            image_url=product.image_url,
            description=product.description,
        )


class RecommendationOut(BaseModel):
    """Lowest-calorie and balanced picks for a query."""

    query: str
    lowest_calorie: ProductOut | None = None
    balanced: ProductOut | None = None


class EstimateRequest(BaseModel):
    """Inputs for a calorie estimate."""

    base_calories: float = Field(ge=0)
    cup_size: CupSize = "medium"
    sugar_percent: float = Field(default=50, ge=0, le=100)


class EstimateResponse(BaseModel):
    """Estimated calories and sweetness tier."""

    calories: int
    sugar_level: str


class RecordIn(BaseModel):
    """A drink entry: a catalog product id or a free-text name."""

    product_id: str | None = None
    drink_name: str | None = None
    cup_size: CupSize = "medium"
    sugar_percent: float = Field(default=50, ge=0, le=100)
    mood: Mood | None = None
    notes: str = ""


class RecordPatch(BaseModel):
    """Partial update of a record's free-form fields."""

    mood: Mood | None = None
    notes: str | None = None


class BudgetIn(BaseModel):
    """New weekly budget."""

    weekly_budget: int


class BudgetStatusOut(BaseModel):
    """Weekly intake against the budget."""

    weekly_budget: int
    weekly_calories: int
    usage_percentage: float
    remaining_calories: int
    status: str
    message: str

    @classmethod
    def from_domain(cls, status: BudgetStatus) -> "BudgetStatusOut":
        """Build the response model from a domain status."""
        return cls(
            weekly_budget=status.weekly_budget,
            weekly_calories=status.weekly_calories,
            usage_percentage=status.usage_percentage,
            remaining_calories=status.remaining_calories,
            status=status.status,
            message=status.message,
        )


class StatsOut(BaseModel):
    """Record statistics for a user."""

    total_records: int
    total_calories: int
    average_calories: int
    favorite_brand: str
    mood_counts: dict[str, int]

    @classmethod
    def from_domain(cls, stats: RecordStats) -> "StatsOut":
        """Build the response model from domain statistics."""
        return cls(
            total_records=stats.total_records,
            total_calories=stats.total_calories,
            average_calories=stats.average_calories,
            favorite_brand=stats.favorite_brand,
            mood_counts=dict(stats.mood_counts),
        )
