"""DTOs for participant search (input options and result; no ORM dependency)."""

from dataclasses import dataclass, field

from app.application.dtos.participant import ParticipantResult
from app.domain.enums import ParticipantStatus

DEFAULT_LIMIT = 10
DEFAULT_TAG_SCAN_LIMIT = 100
DEFAULT_QUERY_TIMEOUT_MS = 5000
DEFAULT_LOG_PREFIX = "[ParticipantSearch]"


@dataclass(frozen=True)
class SearchOptions:
    """Input for one participant search call.

    status_filter defaults to the directory-visible statuses (member, visitor).
    """

    tenant_id: str
    search_term: str
    limit: int = DEFAULT_LIMIT
    offset: int = 0
    status_filter: tuple[str, ...] = field(
        default_factory=lambda: tuple(ParticipantStatus.visible())
    )
    enable_category_matching: bool = False
    tag_scan_limit: int = DEFAULT_TAG_SCAN_LIMIT
    query_timeout_ms: int = DEFAULT_QUERY_TIMEOUT_MS
    log_prefix: str = DEFAULT_LOG_PREFIX


@dataclass
class SearchResult:
    """Outcome of one search call; built fresh per call.

    participants holds at most ``limit`` rows, unique by participant_id.
    timed_out_queries names the sub-queries that gave up (e.g. field_search_<kw>).
    """

    participants: list[ParticipantResult] = field(default_factory=list)
    matching_category_codes: list[str] = field(default_factory=list)
    count: int = 0
    total_found: int = 0
    has_more: bool = False
    timed_out_queries: list[str] = field(default_factory=list)
    executed_queries: int = 0
    empty_query: bool = False

    @property
    def degraded(self) -> bool:
        """True when at least one sub-query timed out (results may be partial)."""
        return bool(self.timed_out_queries)
