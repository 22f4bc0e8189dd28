# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: exceptions.py
# -----------------------------------------------------------------------------
"""
Exception hierarchy for the semantic memory sample.

All errors are rooted at SemanticMemoryError so callers can catch broadly
or narrowly (DecodingError, ServiceError).

API mapping (see api/routers/memory.py):
  DecodingError -> 502 (corrupt key read back from the index)
  ServiceError  -> 502
"""
from __future__ import annotations


class SemanticMemoryError(Exception):
    """Base exception for all semantic memory errors."""


class DecodingError(SemanticMemoryError, ValueError):
    """Raised when an encoded record id is not valid URL-safe base64 / UTF-8."""


class ServiceError(SemanticMemoryError):
    """Raised when the embedding service or the search service fails."""

    def __init__(self, message: str, *, service: str = "unknown") -> None:
        super().__init__(message)
        self.service = service
