"""Participant search use case: multi-keyword, tag and category matching.

Runs a sequence of tenant-scoped read queries through
IParticipantSearchRepository and merges their rows in discovery order:
keyword order, then field match before tag fallback, then category matches.
Each sub-query runs under its own timeout; a timed-out or failing sub-query
contributes no rows and never aborts the search.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from app.application.dtos.participant import ParticipantResult
from app.application.dtos.search import SearchOptions, SearchResult
from app.domain.exceptions import ValidationException
from app.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)
from app.shared.utils.sanitization import sanitize_keywords

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IParticipantSearchRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Field and category queries fetch extra rows so duplicates across passes
# do not leave the page short.
MIN_PER_QUERY_LIMIT = 100


@dataclass(frozen=True)
class _SubQueryOutcome(Generic[T]):
    """Result of one timeout-wrapped sub-query."""

    data: T | None
    timed_out: bool = False
    failed: bool = False


class _Accumulator:
    """Ordered, id-deduplicated participant collection capped at target."""

    def __init__(self, target: int) -> None:
        self.target = target
        self.items: list[ParticipantResult] = []
        self._ids: set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.items) >= self.target

    def __contains__(self, participant_id: str) -> bool:
        return participant_id in self._ids

    def add(self, participant: ParticipantResult) -> bool:
        """Append participant unless full or already present. Returns True if added."""
        if self.full or participant.participant_id in self._ids:
            return False
        self.items.append(participant)
        self._ids.add(participant.participant_id)
        return True

    def merge(self, rows: list[ParticipantResult]) -> int:
        """Add rows in order until full; return how many were new."""
        added = 0
        for row in rows:
            if self.full:
                break
            if self.add(row):
                added += 1
        return added


def tags_match(tags: list[str] | None, keyword: str) -> bool:
    """Return True if any tag contains keyword (case-insensitive substring)."""
    if not tags:
        return False
    needle = keyword.lower()
    return any(tag and needle in tag.lower() for tag in tags)


def _validate(options: SearchOptions) -> None:
    if not options.tenant_id or not options.tenant_id.strip():
        raise ValidationException("tenant_id is required", field="tenant_id")
    if options.limit < 1:
        raise ValidationException("limit must be at least 1", field="limit")
    if options.offset < 0:
        raise ValidationException("offset must not be negative", field="offset")
    if options.tag_scan_limit < 1:
        raise ValidationException(
            "tag_scan_limit must be at least 1", field="tag_scan_limit"
        )
    if options.query_timeout_ms < 1:
        raise ValidationException(
            "query_timeout_ms must be at least 1", field="query_timeout_ms"
        )
    if not options.status_filter:
        raise ValidationException(
            "status_filter must name at least one status", field="status_filter"
        )


class ParticipantSearchService:
    """Tenant-scoped participant search (fields, tags, business categories).

    Stateless apart from the repository; every call builds its own
    accumulator, so one instance can serve concurrent requests.
    """

    def __init__(self, search_repo: IParticipantSearchRepository) -> None:
        self.search_repo = search_repo

    async def _run_sub_query(
        self,
        query_name: str,
        query_fn: Callable[[], Awaitable[T]],
        options: SearchOptions,
        result: SearchResult,
    ) -> _SubQueryOutcome[T]:
        """Run one sub-query under options.query_timeout_ms.

        On timeout the sub-query is cancelled and its name recorded in
        result.timed_out_queries. Store errors are logged. Neither raises.
        """
        prefix = options.log_prefix
        timeout_s = options.query_timeout_ms / 1000
        started = time.perf_counter()
        result.executed_queries += 1
        try:
            data = await asyncio.wait_for(query_fn(), timeout=timeout_s)
        except asyncio.TimeoutError:
            logger.warning(
                "%s Query %r timed out after %dms",
                prefix,
                query_name,
                options.query_timeout_ms,
            )
            result.timed_out_queries.append(query_name)
            add_span_event("search.sub_query_timeout", {"query": query_name})
            return _SubQueryOutcome(data=None, timed_out=True)
        except Exception:
            logger.exception("%s Query %r failed", prefix, query_name)
            add_span_event("search.sub_query_error", {"query": query_name})
            return _SubQueryOutcome(data=None, failed=True)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("%s Query %r completed in %.0fms", prefix, query_name, elapsed_ms)
        return _SubQueryOutcome(data=data)

    async def _match_categories(
        self, options: SearchOptions, term: str, result: SearchResult
    ) -> list[str]:
        outcome = await self._run_sub_query(
            "category_lookup",
            lambda: self.search_repo.find_category_codes(term),
            options,
            result,
        )
        codes = list(dict.fromkeys(outcome.data or []))
        if codes:
            logger.info(
                "%s Found %d matching categories: [%s]",
                options.log_prefix,
                len(codes),
                ", ".join(codes),
            )
        return codes

    async def _field_pass(
        self,
        options: SearchOptions,
        keyword: str,
        per_query_limit: int,
        acc: _Accumulator,
        result: SearchResult,
    ) -> None:
        outcome = await self._run_sub_query(
            f"field_search_{keyword}",
            lambda: self.search_repo.search_by_fields(
                options.tenant_id, keyword, options.status_filter, per_query_limit
            ),
            options,
            result,
        )
        if outcome.data:
            added = acc.merge(outcome.data)
            logger.info(
                "%s Keyword %r: %d field matches, %d new",
                options.log_prefix,
                keyword,
                len(outcome.data),
                added,
            )

    async def _tag_pass(
        self,
        options: SearchOptions,
        keyword: str,
        acc: _Accumulator,
        result: SearchResult,
    ) -> None:
        outcome = await self._run_sub_query(
            f"tag_search_{keyword}",
            lambda: self.search_repo.list_tag_candidates(
                options.tenant_id, options.status_filter, options.tag_scan_limit
            ),
            options,
            result,
        )
        for candidate in outcome.data or []:
            if acc.full:
                break
            if candidate.participant_id in acc:
                continue
            if tags_match(candidate.tags, keyword) and acc.add(candidate):
                logger.debug(
                    "%s Tag match for %r: %s",
                    options.log_prefix,
                    keyword,
                    candidate.display_name,
                )

    async def _category_pass(
        self,
        options: SearchOptions,
        category_code: str,
        per_query_limit: int,
        acc: _Accumulator,
        result: SearchResult,
    ) -> None:
        outcome = await self._run_sub_query(
            f"category_search_{category_code}",
            lambda: self.search_repo.search_by_category(
                options.tenant_id, category_code, options.status_filter, per_query_limit
            ),
            options,
            result,
        )
        if outcome.data:
            added = acc.merge(outcome.data)
            logger.info(
                "%s Category %s: %d matches, %d new",
                options.log_prefix,
                category_code,
                len(outcome.data),
                added,
            )

    @traced("participant_search.search")
    async def search(self, options: SearchOptions) -> SearchResult:
        """Search participants of options.tenant_id.

        Returns a SearchResult whose participants page is
        ``discovered[offset:offset + limit]``. Empty or unusable search
        terms give an empty result with empty_query=True.

        Raises:
            ValidationException: If options are out of range (no query is issued).
        """
        _validate(options)
        prefix = options.log_prefix
        result = SearchResult()

        term = options.search_term.strip()
        if not term:
            logger.info("%s Empty search term", prefix)
            result.empty_query = True
            return result

        keywords = sanitize_keywords(term)
        if not keywords:
            logger.info("%s No valid keywords after sanitization", prefix)
            result.empty_query = True
            return result

        # +1: sentinel row that tells the caller another page exists.
        target = options.offset + options.limit + 1
        per_query_limit = max(MIN_PER_QUERY_LIMIT, target * 2)
        logger.info(
            "%s tenant=%s keywords=[%s] limit=%d offset=%d statuses=[%s] categories=%s",
            prefix,
            options.tenant_id,
            ", ".join(keywords),
            options.limit,
            options.offset,
            ", ".join(options.status_filter),
            options.enable_category_matching,
        )

        if options.enable_category_matching:
            result.matching_category_codes = await self._match_categories(
                options, term, result
            )

        acc = _Accumulator(target)
        for keyword in keywords:
            if acc.full:
                break
            await self._field_pass(options, keyword, per_query_limit, acc, result)
            if not acc.full:
                await self._tag_pass(options, keyword, acc, result)

        for category_code in result.matching_category_codes:
            if acc.full:
                break
            await self._category_pass(
                options, category_code, per_query_limit, acc, result
            )

        end = options.offset + options.limit
        result.participants = acc.items[options.offset:end]
        result.count = len(result.participants)
        result.total_found = len(acc.items)
        result.has_more = len(acc.items) > end

        add_span_attributes(
            **{
                "search.keywords": len(keywords),
                "search.count": result.count,
                "search.executed_queries": result.executed_queries,
                "search.timed_out": len(result.timed_out_queries),
            }
        )
        logger.info(
            "%s Search complete: %d results (found %d, has_more=%s, queries=%d, timed_out=%d)",
            prefix,
            result.count,
            result.total_found,
            result.has_more,
            result.executed_queries,
            len(result.timed_out_queries),
        )
        return result
