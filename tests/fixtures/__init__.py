# Test fixtures
from .sample_responses import (
    LISTING_URL,
    COMPLETION_URL,
    RAW_BASE,
    SAMPLE_LISTING,
    SAMPLE_CHAPTER,
    GEMINI_ERROR_BODY,
    listing_item,
    completion_body,
    FakeResponse,
    FakeSession,
    RecordingSleep,
)

__all__ = [
    "LISTING_URL",
    "COMPLETION_URL",
    "RAW_BASE",
    "SAMPLE_LISTING",
    "SAMPLE_CHAPTER",
    "GEMINI_ERROR_BODY",
    "listing_item",
    "completion_body",
    "FakeResponse",
    "FakeSession",
    "RecordingSleep",
]
