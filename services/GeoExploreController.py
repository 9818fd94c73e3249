# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-21
# Updated: 2026-10-04
# Description: GeoExploreController.py
# -----------------------------------------------------------------------------
import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from geometry.BoundingBox import try_parse_bounding_box
from geometry.GeoJSONBuilder import to_highlight_bounds
from record.GeoRecord import ScoredRecord
from search.GeoScorer import ScoringMode
from services.GeoSearchService import GeoSearchService, SearchOutcome
from utility.logging_utils import get_class_logger


@dataclass(frozen=True)
class ExploreState:
    open: bool
    index: int
    total: int
    has_prev: bool
    has_next: bool
    item: Optional[ScoredRecord]
    highlight_bounds: Optional[List[List[float]]]


@dataclass(frozen=True)
class SubmitResult:
    generation: int
    applied: bool
    outcome: SearchOutcome


class GeoExploreController:
    """
    Owns the current result set, the explore cursor and the panel state.

    Every submission takes a new generation number; a result set is applied
    only if its generation is still the latest one issued, so a slow query
    can never overwrite the results of a newer one.
    """

    def __init__(self, search_service: GeoSearchService, logger: logging.Logger | None = None) -> None:
        self.search_service = search_service
        self.logger = logger or get_class_logger(self.__class__)

        self._lock = threading.Lock()
        self._generation = 0
        self._applied_generation = 0
        self._outcome: Optional[SearchOutcome] = None
        self._results: Tuple[ScoredRecord, ...] = ()
        self._index = 0
        self._open = False

    # -------------------------------------------------------------------------
    # Result set
    # -------------------------------------------------------------------------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def applied_generation(self) -> int:
        return self._applied_generation

    @property
    def results(self) -> Tuple[ScoredRecord, ...]:
        return self._results

    @property
    def outcome(self) -> Optional[SearchOutcome]:
        return self._outcome

    def begin_search(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def apply_results(self, generation: int, outcome: SearchOutcome) -> bool:
        with self._lock:
            if generation != self._generation:
                self.logger.info(
                    "Dropping stale results for '%s' (generation %d, latest %d)",
                    outcome.query[:120],
                    generation,
                    self._generation,
                )
                return False

            # Replace, never merge; a new result set always starts closed at 0
            self._outcome = outcome
            self._results = tuple(outcome.results)
            self._applied_generation = generation
            self._index = 0
            self._open = False
            return True

    def submit(self, query: str, mode: ScoringMode | str | None = None) -> SubmitResult:
        generation = self.begin_search()
        outcome = self.search_service.search(query, mode)
        applied = self.apply_results(generation, outcome)
        return SubmitResult(generation=generation, applied=applied, outcome=outcome)

    async def submit_async(self, query: str, mode: ScoringMode | str | None = None) -> SubmitResult:
        generation = self.begin_search()
        outcome = await asyncio.to_thread(self.search_service.search, query, mode)
        applied = self.apply_results(generation, outcome)
        return SubmitResult(generation=generation, applied=applied, outcome=outcome)

    # -------------------------------------------------------------------------
    # Explore cursor
    # -------------------------------------------------------------------------
    def start(self) -> ExploreState:
        with self._lock:
            if self._results:
                self._index = 0
                self._open = True
            else:
                self.logger.info("Explore requested with no results")
        return self.state()

    def navigate(self, direction: str) -> ExploreState:
        with self._lock:
            if direction == "next" and self._index < len(self._results) - 1:
                self._index += 1
            elif direction == "prev" and self._index > 0:
                self._index -= 1
            elif direction not in ("next", "prev"):
                raise ValueError(f"direction must be 'next' or 'prev', got {direction!r}")
        return self.state()

    def next(self) -> ExploreState:
        return self.navigate("next")

    def prev(self) -> ExploreState:
        return self.navigate("prev")

    def close(self) -> ExploreState:
        with self._lock:
            self._open = False
        return self.state()

    def current_item(self) -> Optional[ScoredRecord]:
        if not self._results:
            return None
        return self._results[self._index]

    def state(self) -> ExploreState:
        with self._lock:
            item = self.current_item()
            total = len(self._results)
            highlight = None
            if self._open and item is not None:
                box = try_parse_bounding_box(item.record.bbox)
                if box is not None:
                    highlight = to_highlight_bounds(box)

            return ExploreState(
                open=self._open,
                index=self._index,
                total=total,
                has_prev=self._index > 0,
                has_next=self._index < total - 1,
                item=item,
                highlight_bounds=highlight,
            )
