# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: RecordOptions
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional

import settings
from memory.RecordDefinition import MEMORY_RECORD_DEFINITION, RecordDefinition
from memory.RecordMapper import RecordMapper


@dataclass(frozen=True)
class AzureAISearchVectorStoreOptions:
    """Store-wide options. Per-call options may override the collection name."""
    default_collection_name: str = settings.MEMORY_COLLECTION_DEFAULT
    record_definition: RecordDefinition = MEMORY_RECORD_DEFINITION
    # Defaults to a mapper over record_definition
    mapper: Optional[RecordMapper] = None

    def __post_init__(self) -> None:
        if self.mapper is None:
            object.__setattr__(self, "mapper", RecordMapper(self.record_definition))
        elif self.mapper.definition != self.record_definition:
            raise ValueError("mapper.definition must be the store record_definition")


@dataclass(frozen=True)
class GetRecordOptions:
    collection_name: Optional[str] = None
    # Vectors are large; only fetch them when asked
    include_vectors: bool = False


@dataclass(frozen=True)
class UpsertRecordOptions:
    collection_name: Optional[str] = None


@dataclass(frozen=True)
class DeleteRecordOptions:
    collection_name: Optional[str] = None


@dataclass(frozen=True)
class SearchOptions:
    collection_name: Optional[str] = None
    limit: int = settings.SEARCH_LIMIT_DEFAULT
    include_vectors: bool = False
