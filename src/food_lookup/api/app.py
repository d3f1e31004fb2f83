"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from food_lookup.api.models import (
    BarcodeEntryResponse,
    BarcodeLookupResponse,
    FoodSubmission,
    RecentSearchModel,
    SearchResponse,
    TrendingTermModel,
)
from food_lookup.app_logging import configure_logging
from food_lookup.containers import AppContainer
from food_lookup.domain.errors import InvalidInputError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings)
    logger = logging.getLogger(__name__)
    page_size = container.settings.search_page_size

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("Rejected request %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(
        request: Request,
        q: str = Query(max_length=200),
        premium: bool = False,
        limit: int | None = Query(default=None, ge=1, le=100),
    ) -> SearchResponse:
        """Search every food source and return ranked results."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.engine.search(
            q, premium=premium, max_results=limit or page_size
        )
        return SearchResponse.from_result(result)

    @app.get("/barcodes/history")
    async def barcode_history(
        request: Request, limit: int = Query(default=20, ge=1, le=200)
    ) -> dict[str, list[BarcodeEntryResponse]]:
        """Return recently cached barcodes, newest first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.engine.scan_history(limit)
        return {"entries": [BarcodeEntryResponse.from_entry(e) for e in entries]}

    @app.get("/barcodes/{barcode}")
    async def lookup_barcode(barcode: str, request: Request) -> BarcodeLookupResponse:
        """Resolve a barcode through the caches and providers."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.engine.lookup_barcode(barcode)
        return BarcodeLookupResponse.from_result(result)

    @app.post("/barcodes/{barcode}", status_code=status.HTTP_201_CREATED)
    async def submit_barcode(
        barcode: str, submission: FoodSubmission, request: Request
    ) -> BarcodeEntryResponse:
        """Store a user-provided record for a barcode."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.engine.submit_barcode(
            barcode, submission.to_record(barcode)
        )
        return BarcodeEntryResponse.from_entry(entry)

    @app.get("/searches/recent")
    async def recent_searches(
        request: Request, limit: int = Query(default=10, ge=1, le=50)
    ) -> dict[str, list[RecentSearchModel]]:
        """Return the most recent distinct searches."""
        state_container: AppContainer = request.app.state.container
        searches = state_container.engine.recent_searches(limit)
        return {
            "searches": [RecentSearchModel.model_validate(item) for item in searches]
        }

    @app.delete("/searches/recent")
    async def clear_recent_searches(request: Request) -> dict[str, str]:
        state_container: AppContainer = request.app.state.container
        state_container.engine.clear_recent()
        return {"status": "ok"}

    @app.get("/searches/trending")
    async def trending_terms(
        request: Request, limit: int = Query(default=8, ge=1, le=30)
    ) -> dict[str, list[TrendingTermModel]]:
        """Return the most frequently searched terms."""
        state_container: AppContainer = request.app.state.container
        terms = state_container.engine.trending_terms(limit)
        return {"terms": [TrendingTermModel.model_validate(item) for item in terms]}

    return app
