"""Participant API: directory reads and participant search (thin routes)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    get_authorized_tenant_id,
    get_participant_search_service,
    get_participant_service,
)
from app.application.dtos.search import SearchOptions
from app.application.use_cases.participants import MAX_PAGE_SIZE, ParticipantService
from app.application.use_cases.search import ParticipantSearchService
from app.core.config import get_settings
from app.core.limiter import limit_search
from app.domain.enums import ParticipantStatus
from app.domain.exceptions import ValidationException
from app.schemas.participant import ParticipantListResponse, ParticipantResponse
from app.schemas.search import ParticipantSearchResponse

DEGRADED_HEADER = "X-Search-Degraded"

router = APIRouter()


def _resolve_statuses(status: list[str] | None) -> tuple[str, ...]:
    """Requested statuses, or the configured default; unknown values raise 400."""
    if not status:
        return tuple(get_settings().search_statuses)
    allowed = ParticipantStatus.values()
    unknown = [s for s in status if s not in allowed]
    if unknown:
        raise ValidationException(
            f"Unknown participant status: {', '.join(unknown)}", field="status"
        )
    return tuple(dict.fromkeys(status))


@router.get("/search", response_model=ParticipantSearchResponse)
@limit_search
async def search_participants(
    request: Request,
    response: Response,
    tenant_id: Annotated[str, Depends(get_authorized_tenant_id)],
    search_svc: Annotated[
        ParticipantSearchService, Depends(get_participant_search_service)
    ],
    q: Annotated[str, Query(max_length=500, description="Search text")] = "",
    limit: Annotated[int | None, Query(ge=1, description="Page size")] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    status: Annotated[
        list[str] | None, Query(description="Statuses to include (repeatable)")
    ] = None,
    categories: Annotated[
        bool | None, Query(description="Also match business category names")
    ] = None,
):
    """Search the tenant's participants by name, contact, company, tags and categories.

    Sets X-Search-Degraded: true when a sub-query timed out and the result
    may be incomplete.
    """
    settings = get_settings()
    page_size = min(limit or settings.search_default_limit, settings.search_max_limit)
    result = await search_svc.search(
        SearchOptions(
            tenant_id=tenant_id,
            search_term=q,
            limit=page_size,
            offset=offset,
            status_filter=_resolve_statuses(status),
            enable_category_matching=(
                settings.search_enable_category_matching
                if categories is None
                else categories
            ),
            tag_scan_limit=settings.search_tag_scan_limit,
            query_timeout_ms=settings.search_query_timeout_ms,
        )
    )
    if result.degraded:
        response.headers[DEGRADED_HEADER] = "true"
    return ParticipantSearchResponse(
        participants=[
            ParticipantResponse.model_validate(p) for p in result.participants
        ],
        matching_category_codes=result.matching_category_codes,
        count=result.count,
        total_found=result.total_found,
        has_more=result.has_more,
        limit=page_size,
        offset=offset,
        timed_out_queries=result.timed_out_queries,
    )


@router.get("", response_model=ParticipantListResponse)
async def list_participants(
    tenant_id: Annotated[str, Depends(get_authorized_tenant_id)],
    participant_svc: Annotated[ParticipantService, Depends(get_participant_service)],
    status: Annotated[str | None, Query(description="Filter by status")] = None,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """List the tenant's participants, newest first."""
    page = await participant_svc.list_participants(
        tenant_id, status=status, limit=limit, offset=offset
    )
    return ParticipantListResponse(
        items=[ParticipantResponse.model_validate(p) for p in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{participant_id}", response_model=ParticipantResponse)
async def get_participant(
    participant_id: str,
    tenant_id: Annotated[str, Depends(get_authorized_tenant_id)],
    participant_svc: Annotated[ParticipantService, Depends(get_participant_service)],
):
    """Get one participant of the tenant (404 if absent or in another tenant)."""
    participant = await participant_svc.get_participant(tenant_id, participant_id)
    return ParticipantResponse.model_validate(participant)
