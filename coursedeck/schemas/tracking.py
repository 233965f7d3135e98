"""
Tracking record schemas for CourseDeck.

Defines the key names, default values and status enums of the
SCORM-style learning record, plus the summary read back at completion.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class TrackingKey:
    """Known keys of the tracking record."""
    LOCATION = "location"
    SCORE_RAW = "score.raw"
    COMPLETION_STATUS = "completion_status"
    SUCCESS_STATUS = "success_status"

    @staticmethod
    def interaction_id(slot: int) -> str:
        return f"interactions.{slot}.id"

    @staticmethod
    def interaction_result(slot: int) -> str:
        return f"interactions.{slot}.result"


class CompletionStatus(str, Enum):
    INCOMPLETE = "incomplete"
    COMPLETED = "completed"


class SuccessStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"


class InteractionResult(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


DEFAULT_RECORD: dict[str, str] = {
    TrackingKey.LOCATION: "0",
    TrackingKey.SCORE_RAW: "0",
    TrackingKey.COMPLETION_STATUS: CompletionStatus.INCOMPLETE.value,
}


class CourseSummary(BaseModel):
    """Final results shown on the completion slide."""
    score: str = "N/A"
    success_status: Optional[str] = None
    completion_status: Optional[str] = None

    @property
    def status_label(self) -> str:
        if self.success_status == SuccessStatus.PASSED.value:
            return "Passed"
        if self.success_status == SuccessStatus.FAILED.value:
            return "Failed"
        return "Unknown"
