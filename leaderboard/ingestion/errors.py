"""Exceptions raised while fetching and parsing the source documents."""

from typing import Optional


class IngestionError(Exception):
    """Base exception for ingestion errors"""
    pass


class ConfigurationError(IngestionError):
    """Raised when a source URL has not been configured"""
    pass


class FetchError(IngestionError):
    """Raised when a document cannot be retrieved"""

    def __init__(self, message: str, status_code: Optional[int] = None, kind: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.kind = kind


class EmptyDocument(IngestionError):
    """Raised when a document has fewer lines than its layout requires"""

    def __init__(self, message: str, kind: Optional[str] = None, line_count: int = 0):
        super().__init__(message)
        self.kind = kind
        self.line_count = line_count
