"""Exceptions raised by the retrieval pipeline"""

from typing import Optional


class RAGError(Exception):
    """Base class for all pocketrag errors"""


class EmbeddingUnavailable(RAGError):
    """The embedding provider is not initialized or cannot be reached"""

    def __init__(self, message: str = "Embedding provider not available"):
        super().__init__(message)


class VectorizationFailed(RAGError):
    """The provider could not embed the given text"""

    def __init__(self, message: str = "Failed to vectorize text"):
        super().__init__(message)


class DimensionMismatch(RAGError):
    """Two vectors that must be compared have different lengths"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Embedding dimension mismatch: expected {expected}, got {actual}")


class LoadError(RAGError):
    """The corpus source is missing, unreadable or malformed"""


class ApiError(RAGError):
    """The remote generation request failed"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(f"API error: {message}")
