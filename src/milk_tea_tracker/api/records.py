"""Record and budget endpoints scoped to the calling user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from milk_tea_tracker.api.schemas import (
    BudgetIn,
    BudgetStatusOut,
    RecordIn,
    RecordPatch,
    StatsOut,
)
from milk_tea_tracker.config import parse_timezone
from milk_tea_tracker.services.records import assemble_record

if TYPE_CHECKING:
    from milk_tea_tracker.containers import AppContainer
    from milk_tea_tracker.domain.products import Product
    from milk_tea_tracker.domain.records import RecordSaveResult, TeaRecord

router = APIRouter(tags=["records"])

_UNPROCESSABLE = 422


async def current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Return the caller's user id from the ``X-User-Id`` header."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return x_user_id.strip()


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/records")
async def list_records(
    request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, object]:
    """Return the user's records, newest first."""
    records = _container(request).record_service.list_records(user_id)
    return {"records": [record.to_payload() for record in records]}


@router.post("/records", status_code=status.HTTP_201_CREATED)
async def create_record(
    body: RecordIn, request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, object]:
    """Log a new drink."""
    container = _container(request)
    record = _assemble(container, body, existing=None)
    result = container.record_service.save(user_id, record)
    return _save_response(result)


@router.put("/records/{record_id}")
async def replace_record(
    record_id: str,
    body: RecordIn,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Re-enter a drink, keeping the record's identity and creation time."""
    container = _container(request)
    existing = container.record_service.get(user_id, record_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    record = _assemble(container, body, existing=existing)
    result = container.record_service.save(user_id, record, editing=True)
    return _save_response(result)


@router.patch("/records/{record_id}")
async def patch_record(
    record_id: str,
    body: RecordPatch,
    request: Request,
    user_id: str = Depends(current_user_id),
) -> dict[str, object]:
    """Update the mood or notes of a record."""
    container = _container(request)
    if container.record_service.get(user_id, record_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    result = container.record_service.update(
        user_id, record_id, body.model_dump(exclude_none=True)
    )
    return _save_response(result)


@router.delete("/records/{record_id}")
async def delete_record(
    record_id: str, request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, str]:
    """Delete a record; unknown ids succeed without changes."""
    if not _container(request).record_service.delete(user_id, record_id):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Delete failed, please retry",
        )
    return {"status": "ok"}


@router.get("/records/stats")
async def record_stats(
    request: Request, user_id: str = Depends(current_user_id)
) -> StatsOut:
    """Return totals and favorites for the user's records."""
    stats = _container(request).stats_service.get_stats(user_id)
    return StatsOut.from_domain(stats)


@router.get("/budget")
async def get_budget(
    request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, int]:
    """Return the user's weekly calorie budget."""
    return {"weekly_budget": _container(request).budget_service.get_budget(user_id)}


@router.put("/budget")
async def set_budget(
    body: BudgetIn, request: Request, user_id: str = Depends(current_user_id)
) -> dict[str, int]:
    """Update the user's weekly calorie budget."""
    try:
        budget = _container(request).budget_service.set_budget(
            user_id, body.weekly_budget
        )
    except ValueError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
    return {"weekly_budget": budget}


@router.get("/budget/status")
async def budget_status(
    request: Request, user_id: str = Depends(current_user_id)
) -> BudgetStatusOut:
    """Compare this week's calories with the budget."""
    container = _container(request)
    budget = container.budget_service.get_budget(user_id)
    weekly_calories = container.record_service.weekly_calories(
        user_id, parse_timezone(container.settings.timezone)
    )
    return BudgetStatusOut.from_domain(
        container.budget_service.status(budget, weekly_calories)
    )


def _assemble(
    container: AppContainer, body: RecordIn, existing: TeaRecord | None
) -> TeaRecord:
    selection: Product | str
    if body.product_id:
        product = container.catalog_service.get_product(body.product_id)
        if product is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown product"
            )
        selection = product
    else:
        selection = body.drink_name or ""
    try:
        return assemble_record(
            selection,
            body.cup_size,
            body.sugar_percent,
            mood=body.mood,
            notes=body.notes,
            existing=existing,
        )
    except ValueError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc


def _save_response(result: RecordSaveResult) -> dict[str, object]:
    if not result.ok or result.record is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.message
        )
    return {
        "message": result.message,
        "target": result.target,
        "record": result.record.to_payload(),
    }
