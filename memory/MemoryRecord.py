# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: MemoryRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class MemoryRecord:
    """
    One searchable item in semantic memory.

    The id is the natural identifier (e.g. a URL); it is only encoded into a
    storage-safe key by RecordMapper at the storage boundary.
    """

    # Record id. Not filterable in the index to save quota; lookups are by key.
    id: str

    # Content is stored here.
    text: Optional[str] = None

    # Optional description of the content, e.g. a title. Source of the embedding.
    description: Optional[str] = None

    # Serialized side data, e.g. JSON as text.
    additional_metadata: Optional[str] = None

    # Embedding vector, never None.
    embedding: List[float] = field(default_factory=list)

    # Name of the external source when the content and id reference external information.
    external_source_name: Optional[str] = None

    # Whether the record references external information.
    is_reference: bool = False

    def __post_init__(self) -> None:
        # Own copy so callers cannot mutate the record through their list
        embedding = [] if self.embedding is None else list(self.embedding)
        object.__setattr__(self, "embedding", embedding)

    def short_preview(self, n: int = 80) -> str:
        """Return a compact preview for logging."""
        clean = " ".join((self.text or "").split())
        preview = (clean[:n] + "...") if len(clean) > n else clean
        return f"[{self.external_source_name or '-'} | {self.id}] {preview}"
