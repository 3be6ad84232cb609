"""Recommendation scoring over catalog search results."""

from milk_tea_tracker.domain.products import Product, Recommendation

RATING_WEIGHT = 0.5
CALORIE_WEIGHT = 0.3
BRAND_WEIGHT = 0.2
MAX_RATING = 5


def recommend(results: list[Product]) -> Recommendation:
    """Pick the lowest-calorie product and a balanced alternative.

    Ties are broken by the order of ``results`` in both picks. The balanced
    pick is scored over every entry except the lowest-calorie object itself,
    so a duplicate of it still competes.
    """
    if not results:
        return Recommendation(lowest_calorie=None, balanced=None)

    lowest = min(results, key=_calories)
    calories = [_calories(product) for product in results]
    min_calories = min(calories)
    calorie_range = (max(calories) - min_calories) or 1

    candidates = [product for product in results if product is not lowest]
    if not candidates:
        return Recommendation(lowest_calorie=lowest, balanced=None)

    balanced = max(
        candidates,
        key=lambda product: _balance_score(
            product, lowest, min_calories, calorie_range
        ),
    )
    return Recommendation(lowest_calorie=lowest, balanced=balanced)


def _balance_score(
    product: Product, lowest: Product, min_calories: float, calorie_range: float
) -> float:
    rating_score = (float(product.rating or 0) / MAX_RATING) * RATING_WEIGHT
    calorie_score = (
        1 - (_calories(product) - min_calories) / calorie_range
    ) * CALORIE_WEIGHT
    brand_score = BRAND_WEIGHT if (product.brand or "") != (lowest.brand or "") else 0
    return rating_score + calorie_score + brand_score


def _calories(product: Product) -> float:
    return float(product.calories or 0)
