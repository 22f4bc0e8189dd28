# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: VectorRecordStore
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, List, Optional, runtime_checkable

from memory.MemoryQueryResult import MemoryQueryResult
from memory.MemoryRecord import MemoryRecord
from memory.RecordMapper import FlatDocument
from vectorstore.RecordOptions import (
    DeleteRecordOptions,
    GetRecordOptions,
    SearchOptions,
    UpsertRecordOptions,
)


@runtime_checkable
class VectorRecordStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def upsert_document(
            self,
            document: FlatDocument,
            options: Optional[UpsertRecordOptions] = None,
    ) -> str:
        ...

    def upsert(
            self,
            record: MemoryRecord,
            options: Optional[UpsertRecordOptions] = None,
    ) -> str:
        ...

    def upsert_batch(
            self,
            records: Sequence[MemoryRecord],
            options: Optional[UpsertRecordOptions] = None,
    ) -> List[str]:
        ...

    def get_document(
            self,
            key: str,
            options: Optional[GetRecordOptions] = None,
    ) -> Optional[FlatDocument]:
        ...

    def get(
            self,
            key: str,
            options: Optional[GetRecordOptions] = None,
    ) -> Optional[MemoryRecord]:
        ...

    def delete(self, key: str, options: Optional[DeleteRecordOptions] = None) -> None:
        ...

    def vector_search(
            self,
            vector: Sequence[float],
            options: Optional[SearchOptions] = None,
    ) -> List[MemoryQueryResult]:
        ...
