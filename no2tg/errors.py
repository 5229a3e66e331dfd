"""Exception hierarchy for no2tg."""


# ════════════════════════════════════════════════════════
# Classify failures by type, not by string matching.
# The CLI catches No2tgError and reports via classify_error().
# ════════════════════════════════════════════════════════

class No2tgError(Exception):
    """Base class for all no2tg errors."""
    pass

class ConfigurationError(No2tgError):
    """Missing credentials or a setting the run cannot work without."""
    pass

class UnknownCategoryError(ConfigurationError):
    """A record carries a category label with no content variant."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown category: {label!r}")

class RecordValidationError(No2tgError):
    """A record lacks a field its category variant requires."""

    def __init__(self, record_id: str, field: str, reason: str = "is required"):
        self.record_id = record_id
        self.field = field
        super().__init__(f"Record {record_id}: {field} {reason}")

class ContentStoreError(No2tgError):
    """The content store (Notion) rejected or failed a request."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)

class DeliveryError(No2tgError):
    """The messaging API (Telegram) rejected or failed a request."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
