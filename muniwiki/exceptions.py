"""
Custom exceptions for muniwiki lookups and data loading.
"""


class MuniWikiError(Exception):
    """Base exception for all muniwiki errors."""

    pass


class InvalidQueryError(MuniWikiError, ValueError):
    """Search query is empty or whitespace-only."""

    def __init__(self, message: str, query: str = ""):
        """
        Initialize invalid query error.

        Args:
            message: Error description
            query: The raw query as typed by the user
        """
        self.query = query
        super().__init__(message)


class GeocodingError(MuniWikiError):
    """Reverse geocoding request failed or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None, original_error: Exception | None = None):
        """
        Initialize geocoding error.

        Args:
            message: Error description
            status_code: HTTP status code, when a response was received
            original_error: Original exception that caused the failure
        """
        self.status_code = status_code
        self.original_error = original_error
        super().__init__(message)


class FeatureDataError(MuniWikiError):
    """Feature collection could not be loaded from its source."""

    def __init__(self, message: str, path: str | None = None):
        """
        Initialize feature data error.

        Args:
            message: Error description
            path: Path of the data source that failed to load
        """
        self.path = path
        super().__init__(message)


class ConfigError(MuniWikiError):
    """Configuration value is missing or malformed."""

    def __init__(self, message: str, key: str | None = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            key: Environment variable or setting name that failed
        """
        self.key = key
        super().__init__(message)
