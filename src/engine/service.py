"""Voting operations exposed to the transport layers."""
from __future__ import annotations

import logging
from typing import Any, Optional

from src.engine.aggregator import AggregateResult, aggregate_records
from src.engine.catalog import OptionCatalog
from src.engine.errors import RankingValidationError
from src.engine.observability import log_event
from src.engine.records import new_vote_record
from src.engine.validator import ranking_errors
from src.storage.factory import RecordStore

logger = logging.getLogger(__name__)


class VotingService:
    """Validates submissions, appends them to the store and aggregates."""

    def __init__(self, catalog: OptionCatalog, store: RecordStore):
        self.catalog = catalog
        self.store = store

    def list_options(self) -> OptionCatalog:
        return self.catalog

    def submit(self, candidate: Any, trace_id: Optional[str] = None) -> AggregateResult:
        """Store a ranking and return the aggregate including it.

        Raises:
            RankingValidationError: the ranking is rejected; storage is untouched
            StoreIOError: the store could not be read or written
        """
        errors = ranking_errors(candidate, self.catalog)
        if errors:
            log_event("ranking_rejected", {"errors": errors}, trace_id=trace_id)
            raise RankingValidationError(errors)

        record = new_vote_record(list(candidate))
        records = self.store.append_and_save(record)
        log_event(
            "ranking_submitted",
            {"record_id": record.id, "length": len(record.ranking), "total_votes": len(records)},
            trace_id=trace_id,
        )
        return aggregate_records(records, self.catalog)

    def get_aggregate(self) -> AggregateResult:
        records = self.store.load_all()
        logger.debug("Aggregating %s vote records", len(records))
        return aggregate_records(records, self.catalog)
