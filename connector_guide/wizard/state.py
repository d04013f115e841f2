"""
Connector Wizard State Machine

Tracks the current step (1..5), the accumulated answers and the results of
the last fetch, and gates forward navigation.

Steps:
    1 application type -> 2 pole count -> 3 orientation -> 4 special
    requirements -> [fetch] -> 5 results

Stale fetches: each fetch takes a generation number. retreat(), reset() and
any newer fetch move the generation on, and a fetch that finishes under an
old generation is discarded instead of overwriting the results.

Usage:
    wizard = ConnectorWizard(catalog)
    wizard.update_answers(application_type="wire-to-wire")
    wizard.advance()
"""

import logging
import threading
from typing import Any, Mapping, Optional, Sequence

from connector_guide.catalog.base import ConnectorCatalog
from connector_guide.config import RESULTS_STEP, TOTAL_STEPS
from connector_guide.wizard.fetcher import ResultFetcher
from connector_guide.wizard.models import ResultSet, WizardAnswers
from connector_guide.wizard.query import Refinement, compose_queries

logger = logging.getLogger(__name__)

PRE_RESULTS_STEP = RESULTS_STEP - 1


class ConnectorWizard:
    """
    Five-step connector selection wizard.

    Args:
        catalog: Catalog used to build a ResultFetcher (ignored if fetcher is given)
        fetcher: Pre-built ResultFetcher
        refinements: Extra predicate builders passed to the query composer
    """

    def __init__(
        self,
        catalog: Optional[ConnectorCatalog] = None,
        fetcher: Optional[ResultFetcher] = None,
        refinements: Sequence[Refinement] = (),
    ):
        if fetcher is None:
            if catalog is None:
                raise ValueError("ConnectorWizard needs a catalog or a fetcher")
            fetcher = ResultFetcher(catalog)
        self.fetcher = fetcher
        self.refinements = tuple(refinements)

        self.step = 1
        self.answers = WizardAnswers()
        self.results = ResultSet()
        self.loading = False
        self._generation = 0
        self._inflight: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def total_steps(self) -> int:
        return TOTAL_STEPS

    @property
    def progress(self) -> float:
        return self.step / TOTAL_STEPS * 100

    @property
    def generation(self) -> int:
        return self._generation

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_step_valid(self, step: Optional[int] = None) -> bool:
        """Whether the user may leave `step` (default: current step) forwards."""
        step = self.step if step is None else step
        if step == 1:
            return self.answers.application_type is not None
        if step == 2:
            return self.answers.pole_count is not None
        if step == 3:
            return self.answers.orientation is not None
        # Step 4 refinements are optional; results have no forward check
        return True

    def update_answers(self, partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> WizardAnswers:
        """
        Shallow-merge answers.

        Values are coerced to their types (InvalidAnswer on unknown fields or
        disallowed values, answers left unchanged). Step validity is only
        checked on advance().
        """
        updates = dict(partial or {})
        updates.update(fields)
        if updates:
            self.answers = self.answers.merged(**updates)
            logger.debug(f"Wizard answers updated: {sorted(updates)}")
        return self.answers

    def fetch_results(self) -> bool:
        """
        Fetch connectors for the current answers.

        Returns:
            True if the results were stored, False if the fetch went stale
            (retreat/reset/newer fetch happened meanwhile) and was discarded
        """
        generation = self._next_generation()
        queries = compose_queries(self.answers, self.refinements)
        with self._lock:
            self._inflight = generation
            self.loading = True
        try:
            results = self.fetcher.fetch(queries)
        finally:
            # The most recently started fetch owns the loading flag
            with self._lock:
                if self._inflight == generation:
                    self._inflight = None
                    self.loading = False

        if generation != self._generation:
            logger.info(f"Discarding stale connector results (fetch {generation}, current {self._generation})")
            return False

        self.results = results
        return True

    def advance(self) -> bool:
        """
        Move to the next step if the current one is valid.

        Leaving step 4 fetches the results first, provided steps 1-3 are
        still answered. Returns True if the step changed.
        """
        if self.step >= RESULTS_STEP or not self.is_step_valid():
            return False

        if self.step == PRE_RESULTS_STEP:
            # Earlier answers can be cleared after their step was passed
            if not all(self.is_step_valid(step) for step in range(1, PRE_RESULTS_STEP)):
                logger.info("Not fetching connectors: an earlier wizard answer is missing")
                return False
            if not self.fetch_results():
                return False

        self.step += 1
        logger.debug(f"Wizard advanced to step {self.step}")
        return True

    def retreat(self) -> bool:
        """Move back one step (floor 1). Never fetches."""
        self._next_generation()
        if self.step <= 1:
            return False
        self.step -= 1
        logger.debug(f"Wizard went back to step {self.step}")
        return True

    def reset(self) -> None:
        """Return to step 1 with default answers and no results."""
        self._next_generation()
        self.step = 1
        self.answers = WizardAnswers()
        self.results = ResultSet()
        with self._lock:
            self._inflight = None
            self.loading = False
        logger.info("Wizard reset")
