# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: MemoryQueryResult
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional

from memory.MemoryRecord import MemoryRecord


@dataclass(frozen=True)
class MemoryQueryResult:
    """A record returned by vector search with its relevance score."""
    record: MemoryRecord
    relevance: Optional[float] = None
