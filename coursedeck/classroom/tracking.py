"""
TrackingStore - In-memory SCORM-style learning record.

Mirrors the call contract of an LMS runtime API:
- initialize() opens a learner session and seeds the record
- set_value() upserts string values
- commit() checkpoints the record
- finish() closes the session

Real deployments swap this for a backend that flushes on commit.
All lifecycle misuse is reported through return values, never raised.
"""

import logging
from collections import deque
from typing import Any, Optional

from coursedeck.schemas import (
    DEFAULT_RECORD,
    CompletionStatus,
    CourseSummary,
    InteractionResult,
    SuccessStatus,
    TrackingKey,
)


logger = logging.getLogger(__name__)

# Checkpoints kept in memory; older ones are dropped
COMMIT_LOG_LIMIT = 50


class TrackingStore:
    """
    Key/value tracking record with a session lifecycle.

    Values are always stored as strings. Any key is accepted so unknown
    tracking fields pass through untouched.
    """

    def __init__(self, defaults: Optional[dict[str, str]] = None):
        """
        Initialize an inactive store.

        Args:
            defaults: Values seeded on each initialize (default: DEFAULT_RECORD)
        """
        self._defaults = dict(DEFAULT_RECORD if defaults is None else defaults)
        self._active = False
        self._data: dict[str, str] = {}
        self.commit_count = 0
        self.commit_log: deque[dict[str, str]] = deque(maxlen=COMMIT_LOG_LIMIT)

    @property
    def is_active(self) -> bool:
        return self._active

    # -------------------------------------------------------------------------
    # LMS API
    # -------------------------------------------------------------------------

    def initialize(self) -> bool:
        """Open the session. Re-initializing an active session is a no-op."""
        if self._active:
            logger.info("[LMS] Initialize (already active)")
            return True
        self._active = True
        self._data = dict(self._defaults)
        logger.info("[LMS] Initialize")
        return True

    def set_value(self, key: str, value: Any) -> bool:
        """Upsert a value. Returns False if the session is not active."""
        if not self._active:
            logger.warning(f"[LMS] SetValue rejected, session not active: {key}")
            return False
        self._data[key] = str(value)
        logger.info(f"[LMS] SetValue {key} = {value}")
        return True

    def commit(self) -> bool:
        """Checkpoint the record. Safe to call any number of times."""
        if not self._active:
            logger.warning("[LMS] Commit rejected, session not active")
            return False
        checkpoint = self.snapshot()
        self.commit_log.append(checkpoint)
        self.commit_count += 1
        logger.info(f"[LMS] Commit {checkpoint}")
        return True

    def finish(self) -> bool:
        """Close the session. Values remain readable afterwards."""
        if not self._active:
            logger.warning("[LMS] Finish rejected, session not active")
            return False
        self._active = False
        logger.info("[LMS] Finish")
        return True

    def snapshot(self) -> dict[str, str]:
        """Return a copy of all current values, regardless of session state."""
        return dict(self._data)

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)


class LearnerRecord:
    """
    Typed accessors for the known fields of a TrackingStore.

    Keeps key names in one place so callers never spell raw keys.
    """

    def __init__(self, store: TrackingStore):
        self.store = store

    def set_location(self, index: int) -> bool:
        return self.store.set_value(TrackingKey.LOCATION, index)

    def set_score(self, score: int) -> bool:
        return self.store.set_value(TrackingKey.SCORE_RAW, score)

    def set_success_status(self, passed: bool) -> bool:
        status = SuccessStatus.PASSED if passed else SuccessStatus.FAILED
        return self.store.set_value(TrackingKey.SUCCESS_STATUS, status.value)

    def set_completion_status(self, status: CompletionStatus) -> bool:
        return self.store.set_value(TrackingKey.COMPLETION_STATUS, status.value)

    def record_interaction(
        self,
        slot: int,
        interaction_id: str,
        result: InteractionResult = InteractionResult.CORRECT,
    ) -> bool:
        """Write one interaction entry (id and result) into the given slot."""
        ok_id = self.store.set_value(TrackingKey.interaction_id(slot), interaction_id)
        ok_result = self.store.set_value(TrackingKey.interaction_result(slot), result.value)
        return ok_id and ok_result

    def commit(self) -> bool:
        return self.store.commit()

    def summary(self) -> CourseSummary:
        """Read back the final score and statuses."""
        data = self.store.snapshot()
        return CourseSummary(
            score=data.get(TrackingKey.SCORE_RAW, "N/A"),
            success_status=data.get(TrackingKey.SUCCESS_STATUS),
            completion_status=data.get(TrackingKey.COMPLETION_STATUS),
        )
