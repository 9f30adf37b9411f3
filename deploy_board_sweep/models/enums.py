"""Per-card outcome enumeration."""

from enum import Enum


class CardOutcome(Enum):
    """Result of a single card mutation inside a batch."""
    SUCCEEDED = "succeeded"
    ALREADY_IN_STATE = "already_in_state"   # 304 from the API
    FAILED_STATUS = "failed_status"
    FAILED_ERROR = "failed_error"           # raised before a status arrived
