"""
Result Fetcher - Concurrent Role Queries

Runs the composed role queries against the catalog and partitions the
connectors into a ResultSet.

The role queries of one fetch (at most two, e.g. sockets + tabs for
wire-to-wire) run concurrently in a ThreadPoolExecutor and are joined before
returning. A failing or timed-out role query leaves its partition empty and
is recorded in ResultSet.failed_roles; the other roles are still returned.

The timeout bounds the whole fetch: all role queries share one deadline, so
a fetch never waits longer than timeout_seconds however many roles it runs.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Dict, List, Mapping, Optional

from connector_guide.catalog.base import ConnectorCatalog
from connector_guide.wizard.models import ConnectorRecord, ConnectorRole, ResultSet
from connector_guide.wizard.query import RoleQuery

logger = logging.getLogger(__name__)


class ResultFetcher:
    """
    Executes role queries against a ConnectorCatalog.

    Args:
        catalog: Catalog to query
        timeout_seconds: Optional timeout for the whole fetch; None waits indefinitely
    """

    def __init__(self, catalog: ConnectorCatalog, timeout_seconds: Optional[float] = None):
        self.catalog = catalog
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def _remaining(deadline: Optional[float]) -> Optional[float]:
        if deadline is None:
            return None
        return max(0.0, deadline - time.monotonic())

    def _run(self, query: RoleQuery) -> List[ConnectorRecord]:
        return self.catalog.find_connectors(query.predicates, order_by=query.order_by)

    def fetch(self, queries: Mapping[ConnectorRole, RoleQuery]) -> ResultSet:
        """
        Run all queries and return the partitioned results.

        Never raises for catalog failures: see module docstring.
        """
        if not queries:
            return ResultSet()

        partitions: Dict[ConnectorRole, List[ConnectorRecord]] = {}
        failed = set()

        executor = ThreadPoolExecutor(max_workers=len(queries), thread_name_prefix="connector-query")
        try:
            futures = {role: executor.submit(self._run, query) for role, query in queries.items()}
            deadline = None if self.timeout_seconds is None else time.monotonic() + self.timeout_seconds
            for role, future in futures.items():
                try:
                    partitions[role] = future.result(timeout=self._remaining(deadline))
                except FuturesTimeoutError:
                    logger.error(f"Timed out fetching {role.value} connectors after {self.timeout_seconds}s")
                    partitions[role] = []
                    failed.add(role)
                except Exception as e:
                    logger.error(f"Error fetching {role.value} connectors: {e}")
                    partitions[role] = []
                    failed.add(role)
        finally:
            # Do not block on a timed-out query; its result is discarded
            executor.shutdown(wait=False, cancel_futures=True)

        results = ResultSet.from_partitions(partitions, frozenset(failed))
        logger.info(
            "Fetched connectors: "
            + ", ".join(f"{role.value}={len(partitions[role])}" for role in queries)
        )
        return results
