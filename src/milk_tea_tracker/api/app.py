"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request, status

from milk_tea_tracker.api.records import router as records_router
from milk_tea_tracker.api.schemas import (
    EstimateRequest,
    EstimateResponse,
    ProductOut,
    RecommendationOut,
)
from milk_tea_tracker.app_logging import configure_logging
from milk_tea_tracker.containers import AppContainer
from milk_tea_tracker.domain.products import CATEGORIES
from milk_tea_tracker.services.calories import estimate_calories, sugar_level_label
from milk_tea_tracker.services.recommendations import recommend

RECOMMENDATION_SEARCH_LIMIT = 20


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = app.state.container.settings
        logger.info(
            "Starting milk tea tracker (environment=%s, remote=%s)",
            settings.environment,
            settings.remote_enabled,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(records_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/products/search")
    async def search_products(
        request: Request,
        q: str = "",
        limit: int = Query(default=0, ge=0, le=50),
    ) -> dict[str, list[ProductOut]]:
        """Search the catalog by name, brand or description."""
        state_container: AppContainer = request.app.state.container
        products = state_container.catalog_service.search(
            q, limit or state_container.settings.search_limit
        )
        return {"products": [ProductOut.from_domain(product) for product in products]}

    @app.get("/products")
    async def list_products(request: Request) -> dict[str, list[ProductOut]]:
        """Return the full catalog ordered by rating."""
        state_container: AppContainer = request.app.state.container
        products = state_container.catalog_service.list_all()
        return {"products": [ProductOut.from_domain(product) for product in products]}

    @app.get("/products/brands")
    async def list_brands(request: Request) -> dict[str, list[str]]:
        """Return distinct brand names."""
        state_container: AppContainer = request.app.state.container
        return {"brands": state_container.catalog_service.list_brands()}

    @app.get("/products/brand/{brand}")
    async def products_by_brand(
        brand: str, request: Request
    ) -> dict[str, list[ProductOut]]:
        """Return products of one brand."""
        state_container: AppContainer = request.app.state.container
        products = state_container.catalog_service.list_by_brand(brand)
        return {"products": [ProductOut.from_domain(product) for product in products]}

    @app.get("/products/category/{category}")
    async def products_by_category(
        category: str, request: Request
    ) -> dict[str, list[ProductOut]]:
        """Return products in a calorie category."""
        if category not in CATEGORIES:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        state_container: AppContainer = request.app.state.container
        products = state_container.catalog_service.list_by_category(category)
        return {"products": [ProductOut.from_domain(product) for product in products]}

    @app.get("/recommendations")
    async def recommendations(request: Request, q: str = "") -> RecommendationOut:
        """Return the lowest-calorie and balanced picks for a query."""
        state_container: AppContainer = request.app.state.container
        results = state_container.catalog_service.search(
            q, RECOMMENDATION_SEARCH_LIMIT
        )
        picks = recommend(results)
        return RecommendationOut(
            query=q,
            lowest_calorie=(
                ProductOut.from_domain(picks.lowest_calorie)
                if picks.lowest_calorie
                else None
            ),
            balanced=(
                ProductOut.from_domain(picks.balanced) if picks.balanced else None
            ),
        )

    @app.post("/calories/estimate")
    async def estimate(body: EstimateRequest) -> EstimateResponse:
        """Estimate calories for a drink size and sweetness."""
        return EstimateResponse(
            calories=estimate_calories(
                body.base_calories, body.cup_size, body.sugar_percent
            ),
            sugar_level=sugar_level_label(body.sugar_percent),
        )

    return app
