"""Error types for the FitGenius core.

Session and coaching operations degrade to safe defaults instead of raising.
The errors below come from host integrations (stores, content lookup) and
indicate a wiring problem rather than a user mistake.
"""


class FitGeniusError(RuntimeError):
    """Base exception for FitGenius errors."""


class LogStoreError(FitGeniusError):
    """Raised when a log store rejects an operation."""


class DuplicateLogError(LogStoreError):
    """Raised when appending a log whose id is already stored.

    Attributes:
        log_id: Id of the rejected log
    """

    def __init__(self, log_id: str) -> None:
        self.log_id = log_id
        super().__init__(f"Exercise log '{log_id}' already exists")


class StoreCorruptedError(FitGeniusError):
    """Raised when a key-value payload cannot be decoded.

    Attributes:
        key: Storage key holding the bad payload
    """

    def __init__(self, key: str, original_error: Exception) -> None:
        self.key = key
        self.original_error = original_error
        super().__init__(f"Stored value under '{key}' is unreadable: {original_error}")


class LookupUnavailableError(FitGeniusError):
    """Raised by exercise lookups when the content service cannot answer."""
