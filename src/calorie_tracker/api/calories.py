"""Calorie entry, statistics and chart endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from calorie_tracker.api.deps import get_container, require_user
from calorie_tracker.api.schemas import (
    ChartResponse,
    EntryCreateRequest,
    EntryListResponse,
    EntryResponse,
    EntryUpdateRequest,
    StatsResponse,
)
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.stats import ChartPreset, Period
from calorie_tracker.services.entries import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from calorie_tracker.services.stats import ChartSeries

MAX_CHART_DAYS = 366

router = APIRouter(prefix="/api/calories", tags=["calories"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: EntryCreateRequest,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> EntryResponse:
    """Record calories for a day."""
    entry = container.entry_service.create_entry(
        user_id, payload.date, payload.calories, payload.notes
    )
    return EntryResponse.model_validate(entry)


@router.get("")
async def list_entries(  # noqa: PLR0913
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    limit: int = Query(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    page: int = Query(default=1, ge=1),
) -> EntryListResponse:
    """Return the user's entries, newest first."""
    result = container.entry_service.list_entries(
        user_id, start=start_date, end=end_date, limit=limit, page=page
    )
    return EntryListResponse.model_validate(result)


@router.get("/stats")
async def get_stats(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
    period: Period = Query(default=Period.WEEK),
) -> StatsResponse:
    """Return lifetime and period statistics."""
    stats = container.stats_service.get_stats(user_id, period)
    return StatsResponse.model_validate(stats)


@router.get("/chart")
async def get_chart(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    range_name: str | None = Query(default=None, alias="range"),
) -> ChartResponse:
    """Return a zero-filled daily calorie series."""
    if (start_date is None) != (end_date is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="startDate and endDate must be provided together",
        )
    if start_date is not None and end_date is not None:
        if (end_date - start_date).days >= MAX_CHART_DAYS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Chart range cannot exceed {MAX_CHART_DAYS} days",
            )
        series = container.stats_service.get_chart(user_id, start_date, end_date)
    else:
        series = container.stats_service.get_chart_preset(
            user_id, ChartPreset.parse(range_name)
        )
    return _chart_response(series)


@router.get("/{entry_id}")
async def get_entry(
    entry_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> EntryResponse:
    """Return a single entry."""
    entry = container.entry_service.get_entry(user_id, entry_id)
    return EntryResponse.model_validate(entry)


@router.put("/{entry_id}")
async def update_entry(
    entry_id: UUID,
    payload: EntryUpdateRequest,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> EntryResponse:
    """Change the provided fields of an entry."""
    entry = container.entry_service.update_entry(
        user_id,
        entry_id,
        entry_date=payload.date,
        calories=payload.calories,
        notes=payload.notes,
    )
    return EntryResponse.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete an entry."""
    container.entry_service.delete_entry(user_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _chart_response(series: ChartSeries) -> ChartResponse:
    return ChartResponse.model_validate(
        {"start_date": series.start, "end_date": series.end, "points": series.points},
        from_attributes=True,
    )
